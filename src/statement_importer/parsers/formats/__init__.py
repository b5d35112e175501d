"""Statement formats supported by the importer.

DEFAULT_PARSERS is the registry in priority order. Several signatures
overlap (fixed column counts, shared labels), so the first match wins
and the order must not change.
"""

from statement_importer.parsers.formats.epos import EposParser
from statement_importer.parsers.formats.paypay import PayPayParser
from statement_importer.parsers.formats.rakuten import RakutenParser
from statement_importer.parsers.formats.rakuten_card import RakutenCardParser
from statement_importer.parsers.formats.saison import SaisonParser
from statement_importer.parsers.formats.sbi import SbiParser
from statement_importer.parsers.formats.smbc import SmbcParser
from statement_importer.parsers.formats.smbc_card import SmbcCardParser
from statement_importer.parsers.formats.smbc_card2 import SmbcCard2Parser
from statement_importer.parsers.formats.suica import SuicaParser
from statement_importer.parsers.formats.view import ViewParser

DEFAULT_PARSERS = (
    SmbcParser(),
    RakutenParser(),
    EposParser(),
    ViewParser(),
    SaisonParser(),
    RakutenCardParser(),
    SbiParser(),
    SmbcCardParser(),
    SmbcCard2Parser(),
    PayPayParser(),
    SuicaParser(),
)

__all__ = [
    "DEFAULT_PARSERS",
    "EposParser",
    "PayPayParser",
    "RakutenCardParser",
    "RakutenParser",
    "SaisonParser",
    "SbiParser",
    "SmbcCard2Parser",
    "SmbcCardParser",
    "SmbcParser",
    "SuicaParser",
    "ViewParser",
]
