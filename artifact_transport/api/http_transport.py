"""
HTTP transport for artifact repositories.

This module provides the HttpTransport class, which fetches, lists, checks
and uploads resources under a repository base URL. A transport is used in
connection sessions:

    transport = HttpTransport(settings)
    transport.open(repository, proxy_info, authentication_info)
    try:
        transport.get("org/example/lib/1.0/lib-1.0.jar", "lib-1.0.jar")
    finally:
        transport.close()

or, equivalently, ``with transport:`` after ``open``.

While a session is open the ambient proxy properties point at the session's
proxy; ``close`` puts back the values captured by ``open``. Credentials are
bound to the session's HTTP client and answered only when challenged.

A transport is not thread-safe. Use one instance per thread, and keep
sessions with different proxies sequential, since the proxy properties are
process-wide.
"""

# Standard library imports
import logging
import os
from email.utils import parsedate_to_datetime
from pathlib import Path
from typing import Any, BinaryIO, Callable, Dict, List, Optional, Union

# Third-party imports
import httpx

# Local imports
from ..exceptions import (
    ResourceDoesNotExistError,
    TransferFailedError,
    TransportConnectionError,
    TransportError,
)
from ..models.auth import AuthenticationInfo, ProxyInfo
from ..models.context import TransportSettings
from ..models.repository import Repository, Resource, normalize_resource_name
from ..models.transfer import InputData, OutputData, ProxySnapshot, RequestType
from ..protocols.listing_protocol import FileListParser
from ..protocols.transfer_listener import TransferListener
from ..utils.listing import HtmlFileListParser
from ..utils.proxy import proxy_properties, select_proxy
from ..utils.response_utils import classify_get_status, classify_head_status, classify_put_status
from ..utils.session import create_http_client
from ..utils.streams import copy_stream, open_response_stream
from ..utils.url import build_url, directory_path
from .auth import ChallengeAuth, CredentialResolver
from .upload import UploadHandle, UploadState

# Failures raised by httpx before a response exists
REQUEST_ERRORS = (httpx.HTTPError, httpx.InvalidURL, OSError)
UPLOAD_ERRORS = REQUEST_ERRORS + (httpx.StreamError,)


def parse_last_modified(value: Optional[str]) -> int:
    """
    Convert a Last-Modified header into milliseconds since the epoch.

    Returns:
        The timestamp, or 0 when the header is absent or unparsable
    """
    if not value:
        return 0
    try:
        return int(parsedate_to_datetime(value).timestamp() * 1000)
    except (TypeError, ValueError, IndexError):
        logging.debug("Ignoring unparsable Last-Modified header: %s", value)
        return 0


def parse_content_length(value: Optional[str]) -> int:
    """Convert a Content-Length header into an int, -1 when unknown."""
    try:
        return int(value) if value is not None else -1
    except ValueError:
        return -1


class HttpTransport:
    """Fetches, lists, checks and uploads repository resources over HTTP."""

    def __init__(
        self,
        settings: Optional[TransportSettings] = None,
        listing_parser: Optional[FileListParser] = None,
    ) -> None:
        """Initialize the transport.

        Args:
            settings: Cache usage, custom headers and timeout; defaults apply when None
            listing_parser: Parser for directory indexes (HtmlFileListParser by default)
        """
        self.settings = settings or TransportSettings()
        self.use_cache = self.settings.use_cache
        self.http_headers: Dict[str, str] = dict(self.settings.http_headers)
        self.listing_parser: FileListParser = listing_parser or HtmlFileListParser()

        self.repository: Optional[Repository] = None
        self.proxy_info: Optional[ProxyInfo] = None
        self.authentication_info: Optional[AuthenticationInfo] = None
        self.session: Optional[httpx.Client] = None

        self._state = UploadState.CLOSED
        self._snapshot: Optional[ProxySnapshot] = None
        self._upload: Optional[UploadHandle] = None
        self._listeners: List[TransferListener] = []

    # ========================================================================
    # Session lifecycle
    # ========================================================================

    @property
    def state(self) -> UploadState:
        """Current lifecycle state."""
        return self._state

    @property
    def is_open(self) -> bool:
        """Whether a connection session is open."""
        return self._state is not UploadState.CLOSED

    def open(
        self,
        repository: Repository,
        proxy_info: Optional[ProxyInfo] = None,
        authentication_info: Optional[AuthenticationInfo] = None,
    ) -> None:
        """
        Open a connection session against a repository.

        Captures the ambient proxy properties, points them at the proxy (unless
        the repository host is excluded from proxying) and creates the HTTP
        client, with challenge authentication when the proxy or the repository
        has a username.

        Args:
            repository: Repository to connect to
            proxy_info: Optional HTTP proxy
            authentication_info: Optional repository credentials

        Raises:
            TransportConnectionError: If a session is already open or the client cannot be created
        """
        if self.is_open:
            raise TransportConnectionError(f"Connection to {self.repository_url} is already open")

        self._snapshot = proxy_properties.snapshot()
        proxy_info = select_proxy(proxy_info, repository.host)
        if proxy_info is not None:
            proxy_properties.apply(proxy_info)

        resolver = CredentialResolver(proxy_info, authentication_info)
        proxy_auth = None
        if resolver.has_proxy and proxy_info is not None:
            proxy_auth = resolver.resolve(proxy_info.host, proxy_info.port)

        try:
            session = create_http_client(
                proxy_url=proxy_properties.proxy_url(repository.host),
                proxy_auth=proxy_auth,
                auth=ChallengeAuth(resolver) if resolver.enabled else None,
                timeout=self.settings.timeout,
            )
        except (ValueError, httpx.InvalidURL) as e:
            self._restore_proxy_properties()
            raise TransportConnectionError(f"Unable to open connection to {repository.url}: {e}", cause=e) from e

        self.repository = repository
        self.proxy_info = proxy_info
        self.authentication_info = authentication_info
        self.session = session
        self._state = UploadState.IDLE
        logging.info("Opened connection to %s", repository.url)

    def close(self) -> None:
        """
        Close the connection session.

        Discards an outstanding upload, closes the HTTP client and restores
        the ambient proxy properties captured by open. Never raises.
        """
        if self._upload is not None:
            self._upload.release()
            self._upload = None

        if self.session is not None:
            try:
                self.session.close()
            except (httpx.HTTPError, OSError) as e:
                logging.warning("Failed to close HTTP client: %s", e)
            self.session = None

        self._restore_proxy_properties()

        if self._state is not UploadState.CLOSED:
            logging.info("Closed connection to %s", self.repository_url)
        self._state = UploadState.CLOSED

    def _restore_proxy_properties(self) -> None:
        if self._snapshot is None:
            return
        try:
            proxy_properties.restore(self._snapshot)
        except Exception as e:  # pylint: disable=broad-except
            logging.error("Failed to restore proxy properties: %s", e)
        self._snapshot = None

    def __enter__(self) -> "HttpTransport":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: Optional[type], exc_val: Optional[BaseException], exc_tb: Optional[Any]) -> None:
        """Context manager exit - ensures the session is closed."""
        self.close()

    @property
    def repository_url(self) -> str:
        """Base URL of the connected repository ("" when never opened)."""
        return self.repository.url if self.repository is not None else ""

    def _require_session(self) -> httpx.Client:
        if self.session is None or not self.is_open:
            raise TransportConnectionError("Transport is not connected; call open() first")
        return self.session

    # ========================================================================
    # Transfer listeners
    # ========================================================================

    def add_transfer_listener(self, listener: TransferListener) -> None:
        """Register a listener for GET and PUT transfers."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_transfer_listener(self, listener: TransferListener) -> None:
        """Unregister a listener."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def has_transfer_listener(self, listener: TransferListener) -> bool:
        """Check whether a listener is registered."""
        return listener in self._listeners

    def _notify(self, event: str, *args: Any) -> None:
        for listener in list(self._listeners):
            getattr(listener, event)(*args)

    def _progress(self, resource: Resource, request_type: RequestType) -> Callable[[int], None]:
        return lambda length: self._notify("transfer_progress", resource, request_type, length)

    # ========================================================================
    # Fetch (GET)
    # ========================================================================

    def fill_input_data(self, input_data: InputData) -> None:
        """
        Fetch a resource and attach its body stream to input_data.

        Sends "Accept-Encoding: gzip", "Pragma: no-cache" unless caching is
        allowed, then the configured headers. A gzip-encoded body is
        decompressed transparently. The resource's last_modified and
        content_length are filled from the response headers. The caller
        owns input_data.stream and must close it.

        Raises:
            ResourceDoesNotExistError: For a malformed URL or a missing resource
            TransferFailedError: For any other failure
        """
        session = self._require_session()
        resource = input_data.resource
        url = build_url(self.repository_url, resource.name)

        headers = {"Accept-Encoding": "gzip"}
        if not self.use_cache:
            headers["Pragma"] = "no-cache"
        headers.update(self.http_headers)

        logging.debug("GET %s", url)
        try:
            response = session.send(session.build_request("GET", url, headers=headers), stream=True)
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            raise ResourceDoesNotExistError("Invalid repository URL", cause=e) from e
        except REQUEST_ERRORS as e:
            raise TransferFailedError("Error transferring file", cause=e) from e

        try:
            classify_get_status(response.status_code, url)
        except TransportError:
            response.close()
            raise
        input_data.stream = open_response_stream(response)

        resource.last_modified = parse_last_modified(response.headers.get("Last-Modified"))
        resource.content_length = parse_content_length(response.headers.get("Content-Length"))

    def get(self, resource_name: str, destination: Union[str, Path]) -> Resource:
        """
        Download a resource into a local file.

        Args:
            resource_name: Resource path relative to the repository
            destination: Local file to write; parent directories are created

        Returns:
            The fetched resource with its metadata
        """
        resource = Resource(name=resource_name)
        self._download_to_file(resource, Path(destination), 0)
        return resource

    def get_if_newer(self, resource_name: str, destination: Union[str, Path], timestamp: int) -> bool:
        """
        Download a resource only if it is newer than a timestamp.

        Args:
            resource_name: Resource path relative to the repository
            destination: Local file to write
            timestamp: Milliseconds since the epoch; 0 always downloads

        Returns:
            True if the file was downloaded
        """
        return self._download_to_file(Resource(name=resource_name), Path(destination), timestamp)

    def get_to_stream(self, resource_name: str, stream: BinaryIO) -> Resource:
        """Download a resource into a writable binary stream."""
        resource = Resource(name=resource_name)
        self._download(resource, 0, lambda: stream, close_target=False)
        return resource

    def _download_to_file(self, resource: Resource, destination: Path, timestamp: int) -> bool:
        partial = destination.with_name(destination.name + ".part")

        def open_target() -> BinaryIO:
            destination.parent.mkdir(parents=True, exist_ok=True)
            return partial.open("wb")

        try:
            downloaded = self._download(resource, timestamp, open_target, close_target=True)
        except TransportError:
            partial.unlink(missing_ok=True)
            raise

        if downloaded:
            try:
                os.replace(partial, destination)
                if resource.last_modified > 0:
                    mtime = resource.last_modified / 1000
                    os.utime(destination, (mtime, mtime))
            except OSError as e:
                raise TransferFailedError(f"Cannot write {destination}", cause=e) from e
            logging.info("Downloaded %s to %s", resource.name, destination)
        return downloaded

    def _download(
        self,
        resource: Resource,
        timestamp: int,
        open_target: Callable[[], BinaryIO],
        close_target: bool,
    ) -> bool:
        input_data = InputData(resource=resource)
        self._notify("transfer_started", resource, RequestType.GET)
        try:
            self.fill_input_data(input_data)
            with input_data.stream as source:
                if timestamp and resource.last_modified and resource.last_modified <= timestamp:
                    logging.debug("%s is not newer than %d, skipping", resource.name, timestamp)
                    return False
                target = open_target()
                try:
                    copy_stream(source, target, progress=self._progress(resource, RequestType.GET))
                finally:
                    if close_target:
                        target.close()
        except TransportError as e:
            self._notify("transfer_error", resource, RequestType.GET, e)
            raise
        except (OSError, httpx.HTTPError) as e:
            error = TransferFailedError(f"Error transferring file: {resource.name}", cause=e)
            self._notify("transfer_error", resource, RequestType.GET, error)
            raise error from e

        self._notify("transfer_completed", resource, RequestType.GET)
        return True

    # ========================================================================
    # Upload (PUT)
    # ========================================================================

    def open_upload(self, output_data: OutputData) -> UploadHandle:
        """
        Start an upload and attach the writable body stream to output_data.

        Args:
            output_data: Resource to upload; its stream is set on return

        Returns:
            The handle to pass to commit_upload

        Raises:
            TransferFailedError: If another upload is open or the URL is invalid
        """
        self._require_session()
        if self._state is UploadState.UPLOAD_OPEN:
            raise TransferFailedError("Another upload is already open on this transport")

        resource = output_data.resource
        url = build_url(self.repository_url, resource.name)
        try:
            httpx.URL(url)
        except (httpx.InvalidURL, TypeError) as e:
            raise TransferFailedError("Error transferring file", cause=e) from e

        try:
            handle = UploadHandle(resource, url, dict(self.http_headers))
        except OSError as e:
            raise TransferFailedError("Error transferring file", cause=e) from e

        output_data.stream = handle.stream
        self._upload = handle
        self._state = UploadState.UPLOAD_OPEN
        logging.debug("Opened upload to %s", url)
        return handle

    def _take_upload(self, handle: UploadHandle) -> None:
        if self._upload is None or handle is not self._upload:
            raise TransferFailedError("Upload handle is not the open upload of this transport")
        self._upload = None
        self._state = UploadState.IDLE

    def abort_upload(self, handle: UploadHandle) -> None:
        """Discard an open upload without sending it."""
        self._take_upload(handle)
        handle.release()

    def commit_upload(self, handle: UploadHandle, resource_name: str) -> None:
        """
        Send an open upload and check the server's answer.

        The handle is consumed whatever the outcome.

        Args:
            handle: Handle returned by open_upload on this transport
            resource_name: Name of the uploaded resource, used in error messages

        Raises:
            AuthorizationError: On 403
            ResourceDoesNotExistError: On 404
            TransferFailedError: On any other status outside 200/201/202/204,
                on I/O failure, or for a handle this transport did not open
        """
        session = self._require_session()
        self._take_upload(handle)
        url = build_url(self.repository_url, normalize_resource_name(resource_name))

        headers = dict(handle.headers)
        try:
            headers["Content-Length"] = str(handle.size())
            logging.debug("PUT %s (%s bytes)", handle.url, headers["Content-Length"])
            # Redirects are reported as failures through classify_put_status
            response = session.request(
                "PUT", handle.url, headers=headers, content=handle.body(), follow_redirects=False
            )
        except UPLOAD_ERRORS as e:
            raise TransferFailedError("Error transferring file", cause=e) from e
        finally:
            handle.release()

        classify_put_status(response.status_code, url)
        logging.debug("Uploaded %s (status %d)", url, response.status_code)

    def put(self, source: Union[str, Path], resource_name: str) -> None:
        """
        Upload a local file.

        Args:
            source: Local file to upload
            resource_name: Target resource path relative to the repository
        """
        source = Path(source)
        try:
            stat = source.stat()
            stream = source.open("rb")
        except OSError as e:
            raise TransferFailedError(f"Cannot read source file {source}", cause=e) from e

        with stream:
            self.put_from_stream(
                stream, resource_name, content_length=stat.st_size, last_modified=int(stat.st_mtime * 1000)
            )
        logging.info("Uploaded %s as %s", source, resource_name)

    def put_from_stream(
        self, stream: BinaryIO, resource_name: str, content_length: int = -1, last_modified: int = 0
    ) -> None:
        """
        Upload the content of a readable binary stream.

        Args:
            stream: Stream to read the body from
            resource_name: Target resource path relative to the repository
            content_length: Size of the body if known
            last_modified: Modification time in milliseconds since the epoch if known
        """
        resource = Resource(name=resource_name, content_length=content_length, last_modified=last_modified)
        output_data = OutputData(resource=resource)

        self._notify("transfer_started", resource, RequestType.PUT)
        try:
            handle = self.open_upload(output_data)
            try:
                copy_stream(stream, output_data.stream, progress=self._progress(resource, RequestType.PUT))
            except OSError as e:
                self.abort_upload(handle)
                raise TransferFailedError("Error transferring file", cause=e) from e
            self.commit_upload(handle, resource.name)
        except TransportError as e:
            self._notify("transfer_error", resource, RequestType.PUT, e)
            raise

        self._notify("transfer_completed", resource, RequestType.PUT)

    # ========================================================================
    # Existence check (HEAD) and listing
    # ========================================================================

    def resource_exists(self, resource_name: str) -> bool:
        """
        Check whether a resource exists.

        Returns:
            True on 200; False on 404 and on any other status

        Raises:
            AuthorizationError: On 403
            TransferFailedError: On I/O failure
        """
        session = self._require_session()
        url = build_url(self.repository_url, Resource(name=resource_name).name)

        # No request body is sent; HEAD never carries one
        logging.debug("HEAD %s", url)
        try:
            response = session.request("HEAD", url, headers=dict(self.http_headers))
        except REQUEST_ERRORS as e:
            raise TransferFailedError("Error transferring file", cause=e) from e

        return classify_head_status(response.status_code, url)

    def get_file_list(self, directory: str) -> List[str]:
        """
        List the entries of a repository directory.

        Fetches the directory's index page and hands it to the listing parser.

        Args:
            directory: Directory path relative to the repository; "/" is appended if missing

        Returns:
            Entry names as returned by the listing parser

        Raises:
            ResourceDoesNotExistError: If the directory does not exist
            TransferFailedError: If the index cannot be fetched
        """
        directory = directory_path(normalize_resource_name(directory))
        url = build_url(self.repository_url, directory)

        resource = Resource(name=directory)
        input_data = InputData(resource=resource)
        self.fill_input_data(input_data)

        if input_data.stream is None:
            raise TransferFailedError(f"{url} - Could not open input stream for resource: '{resource.name}'")

        with input_data.stream as stream:
            try:
                return self.listing_parser.parse_file_list(url, stream)
            except (OSError, httpx.HTTPError) as e:
                raise TransferFailedError(f"Error reading directory listing {url}", cause=e) from e


__all__ = ["HttpTransport", "parse_last_modified", "parse_content_length"]
