"""JSON rendering of the Script Filter document."""

import json

from mdscriptfilter.models.item import ScriptFilterOutput


def serialize(output: ScriptFilterOutput) -> str:
    """Render the document as compact JSON.

    Absent optional fields are already dropped by the models' ``to_dict``.
    Key order is fixed, so equal documents give byte-identical text.

    Args:
        output: Populated result list or the no-results placeholder.

    Returns:
        JSON text without a trailing newline.
    """
    return json.dumps(output.to_dict(), ensure_ascii=False, separators=(",", ":"))
