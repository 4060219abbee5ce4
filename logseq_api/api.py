import logging

import requests

from logseq_api.editor import EditorManager
from logseq_api.ui import UIManager

_LOG = logging.getLogger(__name__)

DEFAULT_API_ENDPOINT = "http://127.0.0.1:12315"


class LogseqApiError(Exception):
    pass


class LogseqApi(object):
    """Client for the HTTP API server of a running Logseq desktop app."""

    def __init__(self, token="", api_endpoint=DEFAULT_API_ENDPOINT, timeout=30):
        self.api_endpoint = api_endpoint.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.session = requests.Session()

        self.editor = EditorManager(self)
        self.ui = UIManager(self)

    def get_api_url(self):
        return "{0}/api".format(self.api_endpoint)

    def _request_headers(self):
        return {"Authorization": "Bearer {}".format(self.token),
                "Content-Type": "application/json"}

    def call(self, method, *args):
        """
        Invokes a plugin SDK method (e.g. 'logseq.Editor.removeBlock') and returns
        the decoded result. Raises LogseqApiError on HTTP or API level errors.
        """
        _LOG.debug(f"Calling {method} with {len(args)} args")
        response = self.session.post(self.get_api_url(), headers=self._request_headers(),
                                     json={"method": method, "args": list(args)}, timeout=self.timeout)
        if response.status_code != 200:
            _LOG.error(f"Got response {response.status_code} for {method}: {response.text}")
            raise LogseqApiError(f"{method} failed with status {response.status_code}: {response.text}")

        if not response.content:
            return None
        try:
            result = response.json()
        except ValueError:
            return response.text
        if isinstance(result, dict) and result.get("error"):
            raise LogseqApiError(f"{method} failed: {result['error']}")
        return result
