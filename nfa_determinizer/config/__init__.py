# nfa_determinizer/config/__init__.py

from .converter_config import ConverterConfig, DEFAULT_EPSILON, DEFAULT_STATE_PREFIX

__all__ = [
    'ConverterConfig',
    'DEFAULT_EPSILON',
    'DEFAULT_STATE_PREFIX',
]
