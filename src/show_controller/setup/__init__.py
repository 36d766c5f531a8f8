"""
Interactive binding setup.
"""

from .wizard import BindingWizard

__all__ = ['BindingWizard']
