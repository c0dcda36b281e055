"""Built-in sample data source, plus the demo integrations that fall back to it.

Airtable and Google Sheets are listed in the source selector but are not wired
to either service; they serve the sample dataset like the mock source.
"""

from config.sample_data import default_dataset
from extractors.base_extractor import BaseExtractor


class MockExtractor(BaseExtractor):
    name = "mock"

    def extract(self) -> dict:
        return default_dataset()


class AirtableExtractor(MockExtractor):
    name = "airtable"

    def extract(self) -> dict:
        self.logger.info("Airtable is a demo source; serving sample data")
        return super().extract()


class GoogleSheetsExtractor(MockExtractor):
    name = "googleSheets"

    def extract(self) -> dict:
        self.logger.info("Google Sheets is a demo source; serving sample data")
        return super().extract()
