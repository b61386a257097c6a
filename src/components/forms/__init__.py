"""
Form backends implementing the dialog capability
"""

from .form_interface import IForm, NumericField, parse_number
from .scripted_form import ScriptedForm
from .terminal_form import TerminalForm

__all__ = ['IForm', 'NumericField', 'parse_number', 'ScriptedForm', 'TerminalForm']
