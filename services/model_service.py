import logging
from typing import Dict, List

from sqlalchemy.exc import SQLAlchemyError

from extensions import db
from models.model import Model
from utils.access_logger import log_model_action
from utils.errors import ModelCrudError

logger = logging.getLogger(__name__)


class ModelServiceError(ModelCrudError):
    """Raised when a Model write could not be committed"""
    def __init__(self, message: str, code: str = 'MODEL_WRITE_FAILED'):
        super().__init__(message, 500, code)


class ModelService:
    """Service class for persisting Model records"""

    def __init__(self):
        self.db = db

    def list_models(self) -> List[Model]:
        return Model.query.order_by(Model.id).all()

    def get_model(self, model_id: int) -> Model:
        """Loads a model or aborts with 404"""
        return self.db.get_or_404(Model, model_id)

    def create_model(self, user, data: Dict[str, str]) -> Model:
        """
        Persist a new model and record it in the access log

        Args:
            user: principal performing the action
            data: validated values for every field of Model.FIELDS

        Returns:
            Model: The created record

        Raises:
            ModelServiceError: If the commit fails
        """
        try:
            model = Model(**{field: data[field] for field in Model.FIELDS})
            self.db.session.add(model)
            self.db.session.flush()
            log_model_action(user.id, 'CREATE', model)
            self.db.session.commit()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            raise ModelServiceError(f"Failed to create model: {str(e)}", 'CREATE_MODEL_FAILED') from e

        logger.info(f"Model {model.id} created by user_id={user.id}")
        return model

    def update_model(self, user, model: Model, data: Dict[str, str]) -> Model:
        try:
            for field in Model.FIELDS:
                setattr(model, field, data[field])
            log_model_action(user.id, 'UPDATE', model)
            self.db.session.commit()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            raise ModelServiceError(f"Failed to update model {model.id}: {str(e)}", 'UPDATE_MODEL_FAILED') from e

        logger.info(f"Model {model.id} updated by user_id={user.id}")
        return model

    def delete_model(self, user, model: Model) -> int:
        model_id = model.id
        try:
            log_model_action(user.id, 'DELETE', model)
            self.db.session.delete(model)
            self.db.session.commit()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            raise ModelServiceError(f"Failed to delete model {model_id}: {str(e)}", 'DELETE_MODEL_FAILED') from e

        logger.info(f"Model {model_id} deleted by user_id={user.id}")
        return model_id
