"""
Visores interactivos de terminal.
"""

from dynaform.cli.viewer.form_viewer import interactive_form

__all__ = ["interactive_form"]
