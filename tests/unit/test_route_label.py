from types import SimpleNamespace

import pytest
from starlette.requests import Request

from contactform.api.middleware.logging import route_label


def _request(path, template=None):
    scope = {
        "type": "http",
        "method": "GET",
        "scheme": "http",
        "server": ("test", 80),
        "path": path,
        "root_path": "",
        "query_string": b"",
        "headers": [],
    }
    if template is not None:
        scope["route"] = SimpleNamespace(path=template)
    return Request(scope)


@pytest.mark.parametrize(
    "template",
    ["/contact/{contact_id}", "/api/contact/{contact_id}"],
)
def test_label_includes_mount_prefix_however_route_stores_it(template):
    assert route_label(_request("/api/contact/3", template)) == "/api/contact/{contact_id}"


def test_label_for_static_route():
    assert route_label(_request("/api/contacts", "/contacts")) == "/api/contacts"
    assert route_label(_request("/metrics", "/metrics")) == "/metrics"


def test_unmatched_request_uses_raw_path():
    assert route_label(_request("/nowhere")) == "/nowhere"
