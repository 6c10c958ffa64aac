from gemini_clip_lib.actions.action_interface import ActionInterface
from gemini_clip_lib.actions.improve_writing import ImproveWritingAction
from gemini_clip_lib.actions.translate import TranslateAction

ACTIONS = {
    ImproveWritingAction.name: ImproveWritingAction,
    TranslateAction.name: TranslateAction,
}

__all__ = [
    "ACTIONS",
    "ActionInterface",
    "ImproveWritingAction",
    "TranslateAction",
]
