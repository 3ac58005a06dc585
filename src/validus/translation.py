"""
Message translation.

Rules hand their message templates and placeholder values to an optional
translator. MessageCatalogTranslator is a simple translator backed by a mapping
of source template to translated template, suitable for catalogs loaded from
JSON files.
"""

import logging
from typing import Any, Dict, Mapping

from .rules.base import substitute_placeholders

logger = logging.getLogger(__name__)


class MessageCatalogTranslator:
    """
    Translator looking message templates up in a catalog.

    Templates missing from the catalog are used as they are. Placeholders are
    substituted after the lookup.

    Attributes:
        catalog (Dict[str, str]): Translated templates keyed by source template
    """

    def __init__(self, catalog: Mapping[str, str]):
        self.catalog: Dict[str, str] = dict(catalog)

    def translate(self, message: str, params: Mapping[str, Any]) -> str:
        """
        Translate a message template and substitute its placeholders.

        Example:
            >>> translator = MessageCatalogTranslator({"{attribute} is invalid.": "{attribute} est invalide."})
            >>> translator.translate("{attribute} is invalid.", {"attribute": "age"})
            'age est invalide.'
        """
        template = self.catalog.get(message)
        if template is None:
            logger.debug(f"No translation for message: {message}")
            template = message
        return substitute_placeholders(template, params)
