"""Editor module - schedule edits and the operator session."""

from hours_admin.editor.session import ActionOutcome, AdminSession
from hours_admin.editor.updates import EDITABLE_FIELDS, update_day

__all__ = [
    "EDITABLE_FIELDS",
    "ActionOutcome",
    "AdminSession",
    "update_day",
]
