"""REST Basics API client.

A thin wrapper around the HTTP endpoints of the REST Basics API using
the ``requests`` library.  Every method returns a tuple ``(data,
error)``: on success ``error`` is ``None``; on failure ``data`` is
``None`` and ``error`` is a dictionary with the keys ``status_code``
and ``message`` (the ``error`` text sent by the server).

The client exposes one method per endpoint:

* :meth:`welcome` - ``GET /``
* :meth:`list_users`, :meth:`get_user`, :meth:`create_user`,
  :meth:`update_user`, :meth:`delete_user` - the ``/users`` routes
* :meth:`get_balance`, :meth:`deposit`, :meth:`withdraw` - the account
* :meth:`list_transactions`, :meth:`clear_transactions` - the history

Running the module walks through every endpoint against a live server,
printing each response::

    python rest_basics_client.py --base-url http://localhost:3000
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class RestBasicsAPI:
    """Client for the users and bank endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:3000``.
                Include the API prefix if the server was started with one.
            session: Optional requests session.  Any object with a
                compatible ``request`` method may be passed, which is how
                the tests drive an in‑process application.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _send(self, method: str, path: str, json_body: Any | None = None):
        url = f"{self.base_url}{path}"
        logger.debug("Sending %s request to %s", method, url)
        return self.session.request(
            method=method,
            url=url,
            json=json_body,
            timeout=self.timeout,
        )

    @staticmethod
    def _error_from_response(response) -> Error:
        message = ""
        try:
            err_json = response.json()
            if isinstance(err_json, dict):
                message = err_json.get("error") or err_json.get("detail") or str(err_json)
            else:
                message = str(err_json)
        except ValueError:
            message = response.text
        if not message:
            message = f"HTTP {response.status_code}"
        return {"status_code": response.status_code, "message": message}

    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request and decode the JSON response.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT`` or ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/users``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        try:
            response = self._send(method, path, json_body)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}
        if response.status_code >= 400:
            error = self._error_from_response(response)
            logger.error("API request failed (%s): %s", error["status_code"], error["message"])
            return None, error
        if response.content:
            return response.json(), None
        return None, None

    # ------------------------------------------------------------------
    # Root
    # ------------------------------------------------------------------
    def welcome(self) -> Tuple[Optional[str], Optional[Error]]:
        """Fetch the plain text greeting served at ``/``."""
        try:
            response = self._send("GET", "/")
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}
        if response.status_code >= 400:
            return None, self._error_from_response(response)
        return response.text, None

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/users")
        if error:
            return [], error
        return data or [], None

    def get_user(self, user_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/users/{user_id}")

    def create_user(self, name: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/users", json_body={"name": name})

    def update_user(self, user_id: Any, name: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"/users/{user_id}", json_body={"name": name})

    def delete_user(self, user_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("DELETE", f"/users/{user_id}")

    # ------------------------------------------------------------------
    # Bank
    # ------------------------------------------------------------------
    def get_balance(self) -> Tuple[Optional[float], Optional[Error]]:
        """Return the current balance as a number."""
        data, error = self._request("GET", "/balance")
        if error:
            return None, error
        return data.get("balance"), None

    def deposit(self, amount: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/deposit", json_body={"amount": amount})

    def withdraw(self, amount: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/withdraw", json_body={"amount": amount})

    def list_transactions(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/transactions")
        if error:
            return [], error
        return data or [], None

    def clear_transactions(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("DELETE", "/transactions")


def walkthrough(api: RestBasicsAPI) -> List[Tuple[str, Any]]:
    """Call every endpoint once, in the order a tutorial would.

    Returns a list of ``(label, result)`` pairs where ``result`` is the
    decoded response or the error dictionary.
    """
    steps = [
        ("GET /", api.welcome),
        ("GET /users", api.list_users),
        ("GET /users/1", lambda: api.get_user(1)),
        ("POST /users", lambda: api.create_user("Charlie")),
        ("PUT /users/2", lambda: api.update_user(2, "Updated Kai")),
        ("DELETE /users/1", lambda: api.delete_user(1)),
        ("GET /balance", api.get_balance),
        ("POST /deposit", lambda: api.deposit(500)),
        ("POST /withdraw", lambda: api.withdraw(200)),
        ("POST /withdraw (insufficient funds)", lambda: api.withdraw(999999)),
        ("GET /transactions", api.list_transactions),
        ("DELETE /transactions", api.clear_transactions),
    ]
    results: List[Tuple[str, Any]] = []
    for label, call in steps:
        data, error = call()
        results.append((label, error if error else data))
    return results


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Exercise every REST Basics API endpoint.")
    parser.add_argument("--base-url", default="http://localhost:3000", help="server address")
    parser.add_argument("-v", "--verbose", action="store_true", help="log each request")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    api = RestBasicsAPI(base_url=args.base_url)
    for label, result in walkthrough(api):
        print(f"{label}\n  {json.dumps(result)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
