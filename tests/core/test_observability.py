import json
import logging

from src.core.observability import JSONFormatter


def _record(**extra):
    record = logging.LogRecord(
        name="src.apps.blog", level=logging.INFO, pathname=__file__, lineno=1,
        msg="Post %s", args=("created",), exc_info=None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_renders_message_and_extras():
    payload = json.loads(JSONFormatter().format(_record(post_id=3)))

    assert payload["message"] == "Post created"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "src.apps.blog"
    assert payload["post_id"] == 3


def test_json_formatter_skips_missing_extras():
    payload = json.loads(JSONFormatter().format(_record()))

    assert "post_id" not in payload
    assert "category_id" not in payload
