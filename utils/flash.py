from dataclasses import dataclass, asdict
from typing import Dict

from flask import flash, redirect


@dataclass(frozen=True)
class FlashMessage:
    """One-shot payload shown on the page following a redirect"""
    state: str
    message: str

    @classmethod
    def success(cls, message: str) -> 'FlashMessage':
        return cls(state="success", message=message)

    @classmethod
    def error(cls, message: str) -> 'FlashMessage':
        return cls(state="error", message=message)

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def push_flash(payload: FlashMessage):
    # the state travels as the flash category
    flash(payload.message, payload.state)


def redirect_with_flash(location: str, payload: FlashMessage):
    push_flash(payload)
    return redirect(location)
