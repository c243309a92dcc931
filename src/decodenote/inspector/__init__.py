"""Host-facing layer: input classification and inspection reports.

Attributes:
    classify: Route raw text to an event or an identifier.
        See [classify()][decodenote.inspector.classifier.classify].
    Inspector: Configured facade producing JSON-ready reports.
        See [Inspector][decodenote.inspector.report.Inspector].
"""

from .classifier import classify
from .report import Inspector


__all__ = ["Inspector", "classify"]
