"""Exception hierarchy for the link analyzer."""


class LinkAnalyzerError(Exception):
    """Base class for link analyzer errors."""


class HistoryError(LinkAnalyzerError):
    """Writing or clearing the history store failed."""


class ExportError(LinkAnalyzerError):
    """An analysis could not be exported."""
