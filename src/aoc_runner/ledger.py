"""Previously confirmed answers, read back from the puzzle instructions."""

import re

from .models import AnswerState

# The site repeats this line under each solved part
ANSWER_RE = re.compile(r"Your puzzle answer was `([^`]+)`\.")


class AnswerLedger:
    @staticmethod
    def load(instructions_text: str) -> AnswerState:
        """Scan instructions text for confirmed answers, in part order."""
        answers = ANSWER_RE.findall(instructions_text)
        return AnswerState(
            part_one=answers[0] if len(answers) > 0 else None,
            part_two=answers[1] if len(answers) > 1 else None,
        )
