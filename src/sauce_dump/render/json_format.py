"""Render SAUCE records to JSON.

Example output:
{
  "version": "00",
  "title": "Dark Tower",
  "author": "Painter",
  "group": "ACiD",
  "date": "1996-04-01",
  "date_malformed": false,
  "file_size": 10420,
  "data_type": {"code": 1, "name": "Character"},
  "file_type": {"code": 1, "name": "ANSi"},
  "type_info": [80, 25, 0, 0],
  "comment_count": 0,
  "flags": 0,
  "size": "80 x 25 characters"
}
"""

import json
from typing import Any

from sauce_dump.render.text import size_description
from sauce_dump.sauce.record import SauceRecord


def to_dict(record: SauceRecord) -> dict[str, Any]:
    """Convert a record to a JSON-serializable dictionary."""
    return {
        "version": record.version_text,
        "title": record.title,
        "author": record.author,
        "group": record.group,
        "date": record.date.isoformat(),
        "date_malformed": record.date.malformed,
        "file_size": record.file_size,
        "data_type": {"code": record.data_type, "name": record.data_type_name},
        "file_type": {"code": record.file_type, "name": record.file_type_name},
        "type_info": list(record.type_info),
        "comment_count": record.comment_count,
        "flags": record.flags,
        "size": size_description(record),
    }


def render_json(record: SauceRecord, indent: int | None = 2) -> str:
    """Render a record to a JSON string."""
    return json.dumps(to_dict(record), indent=indent, ensure_ascii=False)
