"""
REST adapter for the Ubiregi API.
Responsibilities:
- Resolve resource paths against the API endpoint
- Sign every request (see signer.py)
- Convert requests/responses from/to JSON
- Follow "next-url" links to assemble whole collections
No retries: checkout POSTs are not idempotent.
"""
import json
import logging

import requests

from ubiregi.drivers.ubiregi.util import join_endpoint

DEFAULT_ENDPOINT = "https://ubiregi.com/api/3/"
NEXT_URL_KEY = "next-url"

logger = logging.getLogger(__name__)


class RestClient:
    def __init__(self, signer, endpoint=DEFAULT_ENDPOINT, session=None, timeout=None):
        self.signer = signer
        self.endpoint = endpoint
        self.timeout = timeout
        self._session = session or requests.Session()

    def resolve(self, url_or_path):
        return join_endpoint(self.endpoint, url_or_path)

    def _headers(self, *overrides):
        headers = self.signer.headers()
        for extra in overrides:
            if extra:
                headers.update(extra)
        return headers

    def get(self, url_or_path, query=None, ext_headers=None):
        """Send a signed GET request and decode the JSON response.
       @param url_or_path: resource path relative to the endpoint, or an absolute URL
       @param query: dict, request query params
       @param ext_headers: dict, headers overriding the defaults
       """
        url = self.resolve(url_or_path)
        logger.info("Sending GET request to %s ...", url)
        response = self._session.get(
            url, params=query or {}, headers=self._headers(ext_headers), timeout=self.timeout
        )
        result = response.json()
        logger.info("GET %s done", url)
        return result

    def post(self, url_or_path, content, query=None, ext_headers=None):
        """Send a signed POST request with a JSON body and decode the JSON response.
       @param url_or_path: resource path relative to the endpoint, or an absolute URL
       @param content: JSON-serializable request body
       @param query: dict, request query params
       @param ext_headers: dict, headers overriding the defaults
       """
        url = self.resolve(url_or_path)
        logger.info("Sending POST request to %s ...", url)
        response = self._session.post(
            url,
            data=json.dumps(content),
            params=query or {},
            headers=self._headers({"Content-Type": "application/json"}, ext_headers),
            timeout=self.timeout,
        )
        result = response.json()
        logger.info("POST %s done", url)
        return result

    def index(self, url_or_path, collection, callback=None):
        """
        Download a whole collection, one GET per page.

        :param url_or_path: first page, relative path or absolute URL
        :param collection: key of the array collected from every page
        :param callback: called with every raw decoded page
        :return: list, the pages' arrays concatenated in server order
        """
        acc = []
        next_url = url_or_path
        while next_url:
            page = self.get(next_url)
            if callback:
                callback(page)
            acc.extend(page[collection])
            next_url = page.get(NEXT_URL_KEY)
        return acc

    def close(self):
        self._session.close()
