"""
Per-table content parsers, one module per content file.
"""

from .base import TableParser
from .object_base import ObjectBaseParser
from .projection import ProjectionParser
from .slay import SlayParser
from .brand import BrandParser
from .curse import CurseParser
from .activation import ActivationParser
from .object_property import ObjectPropertyParser
from .object_power import ObjectPowerParser
from .object import ObjectParser
from .ego import EgoParser
from .artifact import ArtifactParser, ARTIFACT_SPARE_SLOTS

__all__ = [
    "TableParser",
    "ObjectBaseParser",
    "ProjectionParser",
    "SlayParser",
    "BrandParser",
    "CurseParser",
    "ActivationParser",
    "ObjectPropertyParser",
    "ObjectPowerParser",
    "ObjectParser",
    "EgoParser",
    "ArtifactParser",
    "ARTIFACT_SPARE_SLOTS",
]
