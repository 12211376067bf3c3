from __future__ import annotations

import urllib.parse
from dataclasses import dataclass
from typing import Any

import requests

from project_bootstrap.config import (
    github_api_url,
    github_token,
    http_timeout,
    user_agent,
)
from project_bootstrap.errors import BootstrapError


class GitHubError(BootstrapError):
    def __init__(self, message: str, *, status_code: int | None = None, payload: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


@dataclass(frozen=True)
class CodeSearchItem:
    name: str
    path: str
    html_url: str


@dataclass(frozen=True)
class LicenseSummary:
    key: str
    spdx_id: str
    name: str


@dataclass(frozen=True)
class License:
    key: str
    spdx_id: str
    name: str
    body: str


def raw_url_for(html_url: str) -> str:
    """Map a github.com blob URL to the URL serving the raw file."""
    return html_url.replace("/blob/", "/raw/", 1)


class GitHubClient:
    def __init__(
        self,
        *,
        base_url: str,
        token: str = "",
        user_agent: str = "project-bootstrap",
        timeout: int = 30,
        session: requests.Session | None = None,
    ) -> None:
        self._base = base_url.rstrip("/")
        self._token = token
        self._user_agent = user_agent
        self._timeout = timeout
        self._http = session or requests.Session()

    @classmethod
    def from_env(cls, *, session: requests.Session | None = None) -> GitHubClient:
        return cls(
            base_url=github_api_url(),
            token=github_token(),
            user_agent=user_agent(),
            timeout=http_timeout(),
            session=session,
        )

    @property
    def has_token(self) -> bool:
        return bool(self._token)

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": self._user_agent,
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _url(self, path: str) -> str:
        return f"{self._base}{path}"

    def _get(self, url: str, *, params: dict[str, Any] | None = None, headers: dict[str, str] | None = None):
        try:
            res = self._http.request(
                "GET",
                url,
                headers=headers if headers is not None else self._headers(),
                params=params,
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise GitHubError(f"GET {url} failed: {exc}") from exc
        if res.status_code >= 400:
            text = res.text
            payload: Any
            try:
                payload = res.json()
            except ValueError:
                payload = {"raw": text}
            raise GitHubError(
                f"GitHub request failed with {res.status_code} for GET {url}",
                status_code=res.status_code,
                payload=payload,
            )
        return res

    def _get_json(self, path: str, *, params: dict[str, Any] | None = None) -> Any:
        res = self._get(self._url(path), params=params)
        try:
            return res.json()
        except ValueError as exc:
            raise GitHubError(
                f"GitHub returned a non-JSON body for GET {path}",
                status_code=res.status_code,
                payload={"raw": res.text},
            ) from exc

    def search_code(self, query: str, *, repo: str) -> list[CodeSearchItem]:
        if not self._token:
            # The code search endpoint rejects anonymous requests.
            raise GitHubError("GITHUB_TOKEN is not set; code search requires authentication")
        data = self._get_json("/search/code", params={"q": f"repo:{repo} {query}"})
        if not isinstance(data, dict) or not isinstance(data.get("items"), list):
            raise GitHubError("Unexpected GitHub code search response", payload=data)
        out: list[CodeSearchItem] = []
        for item in data["items"]:
            if not isinstance(item, dict) or not item.get("html_url"):
                continue
            out.append(
                CodeSearchItem(
                    name=str(item.get("name") or ""),
                    path=str(item.get("path") or item.get("name") or ""),
                    html_url=str(item["html_url"]),
                )
            )
        return out

    def list_licenses(self) -> list[LicenseSummary]:
        data = self._get_json("/licenses")
        if not isinstance(data, list):
            raise GitHubError("Unexpected GitHub licenses response", payload=data)
        return [self._parse_summary(item) for item in data]

    def get_license(self, key: str) -> License:
        encoded = urllib.parse.quote(key, safe="")
        data = self._get_json(f"/licenses/{encoded}")
        summary = self._parse_summary(data)
        body = data.get("body")
        if not isinstance(body, str):
            raise GitHubError(f"License '{key}' has no body", payload=data)
        return License(key=summary.key, spdx_id=summary.spdx_id, name=summary.name, body=body)

    def download_raw(self, html_url: str) -> str:
        # Raw file hosts are not the API; only the user agent is sent.
        res = self._get(raw_url_for(html_url), headers={"User-Agent": self._user_agent})
        return res.text

    @staticmethod
    def _parse_summary(data: Any) -> LicenseSummary:
        if not isinstance(data, dict) or not data.get("key"):
            raise GitHubError("Unexpected GitHub license payload", payload=data)
        key = str(data["key"])
        return LicenseSummary(
            key=key,
            spdx_id=str(data.get("spdx_id") or key),
            name=str(data.get("name") or key),
        )
