"""
ClickUp REST client
Fetches playbook docs and their page content; no caching, no retries
"""

import logging
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from .config import Config
from .schemas import Document

logger = logging.getLogger(__name__)

class ClickUpError(Exception):
    """Custom exception for ClickUp API errors"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

class ClickUpClient:
    """
    Thin wrapper over the ClickUp v2 API

    Usage:
        with ClickUpClient(api_token) as client:
            docs = client.get_docs(folder_id)
    """

    def __init__(
        self,
        api_token: str,
        workspace_id: Optional[str] = None,
        space_id: Optional[str] = None,
        base_url: str = "https://api.clickup.com/api/v2",
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.api_token = api_token
        self.workspace_id = workspace_id
        self.space_id = space_id
        self._http = httpx.Client(
            base_url=base_url,
            headers={
                "Authorization": api_token,
                "Content-Type": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    def __enter__(self) -> "ClickUpClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def _request(self, method: str, endpoint: str, **kwargs) -> Any:
        """
        Send a request and decode the JSON body

        Raises:
            ClickUpError: On transport failure, non-2xx status or invalid JSON
        """
        try:
            response = self._http.request(method, endpoint, **kwargs)
        except httpx.HTTPError as e:
            raise ClickUpError(f"ClickUp request failed: {method} {endpoint}: {e}") from e

        if not response.is_success:
            raise ClickUpError(
                f"ClickUp API error: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise ClickUpError(f"Invalid JSON from ClickUp: {method} {endpoint}") from e

    def get_workspaces(self) -> List[dict]:
        return self._request("GET", "/team").get("teams") or []

    def get_spaces(self, workspace_id: str) -> List[dict]:
        return self._request("GET", f"/team/{workspace_id}/space").get("spaces") or []

    def get_folders(self, space_id: str, archived: bool = False) -> List[dict]:
        params = {"archived": str(archived).lower()}
        return self._request("GET", f"/space/{space_id}/folder", params=params).get("folders") or []

    def get_folder(self, folder_id: str) -> dict:
        return self._request("GET", f"/folder/{folder_id}")

    def get_doc_pages(self, doc_id: str) -> List[dict]:
        data = self._request("GET", f"/docs/{doc_id}/pages")
        # Older responses wrap the list in {"pages": [...]}
        if isinstance(data, dict):
            return data.get("pages") or []
        return data or []

    def find_playbooks_folder(self) -> Optional[dict]:
        """
        Locate the playbooks folder by name

        Walks workspaces -> spaces -> folders and returns the first space's
        "playbooks" folder, or its "rpnet" folder when there is none.

        Returns:
            Raw folder dict, or None if not found or the lookup fails
        """
        try:
            for team in self.get_workspaces():
                for space in self.get_spaces(team["id"]):
                    folders = self.get_folders(space["id"])
                    rpnet = next((f for f in folders if "rpnet" in f.get("name", "").lower()), None)
                    if rpnet:
                        playbooks = next(
                            (f for f in folders if "playbooks" in f.get("name", "").lower()),
                            None,
                        )
                        return playbooks or rpnet
            return None
        except ClickUpError as e:
            logger.error(f"Error finding playbooks folder: {e}")
            return None

    def get_docs(self, folder_id: str, folder_name: Optional[str] = None) -> List[Document]:
        """
        Fetch every doc in a folder with its page content

        Pages are fetched one doc at a time and the folder order is kept. A
        doc whose pages cannot be fetched is still returned, with empty
        content.

        Args:
            folder_id: ClickUp folder ID
            folder_name: Folder name to record when the API omits it

        Returns:
            List of documents; empty if the folder cannot be listed
        """
        try:
            data = self._request("POST", "/docs/search", json={
                "folder_id": folder_id,
                "include_closed": True,
            })
        except ClickUpError as e:
            logger.error(f"Error getting docs for folder {folder_id}: {e}")
            return []

        if not isinstance(data, dict):
            logger.error(f"Unexpected docs response for folder {folder_id}: {type(data).__name__}")
            return []

        documents = []
        for raw in data.get("docs") or []:
            if not isinstance(raw, dict) or not raw.get("id"):
                logger.warning(f"Skipping doc without id in folder {folder_id}")
                continue
            try:
                content = _pages_to_markdown(self.get_doc_pages(raw["id"]))
            except ClickUpError as e:
                logger.error(f"Error getting pages for doc {raw['id']}: {e}")
                content = ""
            try:
                documents.append(_to_document(raw, folder_id, folder_name, content))
            except PydanticValidationError as e:
                logger.warning(f"Skipping malformed doc {raw['id']} in folder {folder_id}: {e}")

        logger.debug(f"Fetched {len(documents)} docs from folder {folder_id}")
        return documents

    def get_all_docs(self) -> List[Document]:
        """
        Fetch docs from every folder in the workspace

        Restricted to the configured workspace and space when set. Docs that
        appear in several folders are returned once, first folder wins.

        Returns:
            List of documents; empty if the workspace cannot be walked
        """
        try:
            if self.workspace_id:
                team_ids = [self.workspace_id]
            else:
                team_ids = [team["id"] for team in self.get_workspaces()]

            folders = []
            for team_id in team_ids:
                for space in self.get_spaces(team_id):
                    if self.space_id and str(space["id"]) != str(self.space_id):
                        continue
                    folders.extend(self.get_folders(space["id"]))
        except ClickUpError as e:
            logger.error(f"Error walking workspace folders: {e}")
            return []

        documents = {}
        for folder in folders:
            for doc in self.get_docs(str(folder["id"]), folder.get("name")):
                documents.setdefault(doc.id, doc)

        return list(documents.values())

def _pages_to_markdown(pages: List[dict]) -> str:
    """Join page bodies; page content is either a string or {markdown, text}"""
    parts = []
    for page in pages:
        if not isinstance(page, dict):
            continue
        content = page.get("content")
        if isinstance(content, dict):
            content = content.get("markdown") or content.get("text")
        parts.append(content or "")
    return "\n\n".join(parts)

def _to_document(raw: dict, folder_id: str, folder_name: Optional[str], content: str) -> Document:
    folder = raw.get("folder") or {}
    return Document(
        id=raw["id"],
        name=raw.get("name"),
        content=content,
        date_created=raw.get("date_created"),
        date_updated=raw.get("date_updated"),
        creator=raw.get("creator"),
        folder={
            "id": str(folder_id),
            "name": folder.get("name") or folder_name or "Unknown",
        },
    )

_client: Optional[ClickUpClient] = None

def get_client() -> ClickUpClient:
    """Shared client built from Config"""
    global _client
    if _client is None:
        _client = ClickUpClient(
            api_token=Config.API_TOKEN,
            workspace_id=Config.WORKSPACE_ID or None,
            space_id=Config.SPACE_ID or None,
            base_url=Config.API_URL,
            timeout=Config.request_timeout(),
        )
    return _client

def fetch_playbooks() -> List[Document]:
    """All docs in the configured playbooks folder"""
    return get_client().get_docs(Config.PLAYBOOKS_FOLDER_ID)
