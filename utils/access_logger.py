# utils/access_logger.py

import logging
from datetime import datetime, timezone

from models.access_log import AccessLog
from extensions import db

logger = logging.getLogger(__name__)


def log_user_action(user_id, action, target):
    """
    Enregistre une action dans les logs d'accès

    Args:
        user_id (int): ID de l'utilisateur qui effectue l'action
        action (str): one of AccessLog.ACTION_TYPES
        target (str): cible de l'action, ex: "model:3"

    Note: le commit est fait par la fonction appelante
    """
    if action not in AccessLog.ACTION_TYPES:
        raise ValueError(f"Invalid action type: {action}")

    log_entry = AccessLog(
        user_id=user_id,
        action=action,
        target=target,
        timestamp=datetime.now(timezone.utc)
    )
    db.session.add(log_entry)
    logger.debug(f"Access log: user {user_id} - {action} - {target}")
    return log_entry


def log_model_action(user_id, action, model):
    return log_user_action(user_id, action, f"model:{model.id}")
