from typing import Optional

def is_empty(value: Optional[str]) -> bool:
    """ None or '' only; whitespace counts as content. """
    return value is None or value == ''

def is_blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ''
