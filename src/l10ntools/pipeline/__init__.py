"""Directory-level conversion pipelines."""

from .converters import (
    ConversionReport,
    PropertiesToJsonConverter,
    XmlToI18nConverter,
    XmlToPropertiesConverter,
)

__all__ = [
    "ConversionReport",
    "PropertiesToJsonConverter",
    "XmlToI18nConverter",
    "XmlToPropertiesConverter",
]
