"""Post-processors applied to found translations before interpolation.

A post-processor is selected by name through the ``postProcess`` variable
(a single name or a sequence of names). ``sprintf`` is registered by
default and formats ``%``-style placeholders with the ``sprintf`` variable.
"""

import re
from typing import Any, Callable, Dict, Mapping

from i18next_resolver.i18n.models import TranslationOptions
from i18next_resolver.logging import get_module_logger

logger = get_module_logger()

PostProcessor = Callable[[str, TranslationOptions, Mapping[str, Any]], str]

_CONVERSION_PATTERN = re.compile(
    r"%[#0 +\-]*(?:\*|\d+)?(?:\.(?:\*|\d*))?[hlL]?(?P<type>[diouxXeEfFgGcrsa%])"
)


def sprintf(text: str, options: TranslationOptions, variables: Mapping[str, Any]) -> str:
    """Format ``%``-style placeholders with the ``sprintf`` variable.

    A list or tuple supplies positional arguments; any other value is a
    single argument. Arguments beyond the placeholders in ``text`` are
    ignored. Without a ``sprintf`` variable the text is unchanged. A format
    failure leaves the text unchanged and logs a warning.
    """
    args = options.sprintf
    if args is None:
        return text

    values = tuple(args) if isinstance(args, (list, tuple)) else (args,)
    values = values[: _argument_count(text)]
    try:
        return text % values
    except (TypeError, ValueError) as e:
        logger.warning("sprintf_failed", text=text, arguments=values, error=str(e))
        return text


def _argument_count(text: str) -> int:
    """Number of positional arguments the conversions in ``text`` consume."""
    count = 0
    for match in _CONVERSION_PATTERN.finditer(text):
        if match.group("type") == "%":
            continue
        count += 1 + match.group(0).count("*")
    return count
