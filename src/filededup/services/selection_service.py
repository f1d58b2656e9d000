"""
Interactive selection of files to delete, one duplicate group at a time.
"""
from typing import List
import questionary

from filededup.core.interfaces import DuplicateSelector
from filededup.core.models import DuplicateGroup
from filededup.utils.convert_utils import ConvertUtils

SELECT_PROMPT = "Select files to DELETE (space to toggle, enter to confirm):"


class QuestionarySelector(DuplicateSelector):
    """Checkbox prompt listing every member path of a group. Nothing is pre-selected."""

    def __init__(self, prompt: str = SELECT_PROMPT):
        self.prompt = prompt

    def select(self, group: DuplicateGroup) -> List[str]:
        # Title is what the terminal shows, value is the path handed back for deletion
        choices = [
            questionary.Choice(title=ConvertUtils.display_path(path), value=path)
            for path in group.paths
        ]
        # unsafe_ask propagates KeyboardInterrupt instead of returning None
        selected = questionary.checkbox(self.prompt, choices=choices).unsafe_ask()
        if selected is None:
            raise RuntimeError("Selection prompt returned no answer")
        return list(selected)
