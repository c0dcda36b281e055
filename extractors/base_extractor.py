"""Abstract base class for all dashboard data sources."""

import logging
from abc import ABC, abstractmethod

from config.schema import REQUIRED_SECTION, has_required_section
from utils.errors import SchemaError

logger = logging.getLogger(__name__)


class BaseExtractor(ABC):
    """Base class: extract → transform → validate pattern."""

    name: str = "base"

    def __init__(self):
        self.logger = logging.getLogger(f"extractor.{self.name}")

    @abstractmethod
    def extract(self):
        """Obtain raw data from the source (parsed JSON, CSV rows, ...)."""
        ...

    def transform(self, raw) -> dict:
        """Map raw data to the canonical shape. Override in subclass."""
        return raw

    def validate(self, data) -> dict:
        """Check the one structural guarantee every payload must meet."""
        if not has_required_section(data):
            raise SchemaError(
                f"Invalid data structure received: '{REQUIRED_SECTION}' "
                "must be present and a list"
            )
        return data

    def run(self) -> dict:
        """Execute full extract → transform → validate pipeline."""
        self.logger.info(f"Starting fetch: {self.name}")
        raw = self.extract()
        data = self.validate(self.transform(raw))
        self.logger.info(
            f"Completed {self.name}: {len(data[REQUIRED_SECTION]):,} donation records"
        )
        return data
