"""
Form components for the parameter system
"""

from .forms import IForm, NumericField, ScriptedForm, TerminalForm, parse_number

__all__ = ['IForm', 'NumericField', 'ScriptedForm', 'TerminalForm', 'parse_number']
