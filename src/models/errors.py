"""Exceptions raised on the host side of the parameter system"""

from typing import List


class ValidationError(ValueError):
    """
    One or more parameters hold a validation error.

    Parameters never raise this themselves; they record the message as state.
    Host helpers raise it when a caller asks for values that are not valid.
    """

    def __init__(self, messages: List[str]):
        self.messages = list(messages)
        super().__init__("\n".join(self.messages))
