"""
Web Companion server for Pet Gallery.

Runs an HTTP server alongside PyGame so a phone browser on the same
network can watch the gallery state and send intents to it.
"""

import json
import queue
import socket
import threading
import traceback
from http.server import HTTPServer, BaseHTTPRequestHandler
from socketserver import ThreadingMixIn

from constants import WEB_COMPANION_PORT
from utils.logging import log_error
from .state_serializer import (
    serialize_gallery_state,
    serialize_save_outcome,
    serialize_web_state,
)
from .action_handler import handle_action

__all__ = [
    "WebCompanion",
    "handle_action",
    "serialize_gallery_state",
    "serialize_save_outcome",
    "serialize_web_state",
]


def _get_local_ip():
    """Get the local network IP address."""
    try:
        s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        s.connect(("8.8.8.8", 80))
        ip = s.getsockname()[0]
        s.close()
        return ip
    except OSError:
        return "localhost"


class _ThreadingHTTPServer(ThreadingMixIn, HTTPServer):
    daemon_threads = True
    allow_reuse_address = True


class WebCompanion:
    """
    Web companion server.

    Serves the latest state at /api/state, streams it over SSE at
    /api/events and queues POSTed actions for the main loop, which
    applies them with process_actions().
    """

    def __init__(self, port=WEB_COMPANION_PORT):
        self.port = port
        self._action_queue = queue.Queue()
        self._state_json = "{}"
        self._state_lock = threading.Lock()
        self._state_event = threading.Event()
        self._server = None
        self._thread = None
        self._running = False
        self._local_ip = "localhost"

    @property
    def url(self):
        return f"http://{self._local_ip}:{self.port}"

    @property
    def running(self):
        return self._running

    @property
    def state_json(self):
        with self._state_lock:
            return self._state_json

    def start(self):
        """
        Bind the server and serve it from a daemon thread.

        Returns:
            True if the server is running
        """
        if self._running:
            return True
        try:
            self._server = _ThreadingHTTPServer(
                ("0.0.0.0", self.port), self._make_handler()
            )
        except OSError as e:
            log_error(
                f"Web Companion failed to start on port {self.port}",
                type(e).__name__,
                traceback.format_exc(),
            )
            print(f"Web Companion failed to start: {e}")
            return False

        # Port 0 lets the OS pick a free port
        self.port = self._server.server_address[1]
        self._running = True
        self._local_ip = _get_local_ip()
        print(f"\n  Web Companion: {self.url}\n")
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)
        self._thread.start()
        return True

    def stop(self):
        """Stop the web companion server."""
        self._running = False
        self._state_event.set()
        if self._server:
            self._server.shutdown()
            self._server.server_close()
            self._server = None
        self._thread = None

    def push_state(self, payload):
        """Publish a serialized state dict to /api/state and SSE clients."""
        try:
            state_json = json.dumps(payload, default=str)
        except (TypeError, ValueError) as e:
            log_error(
                "Failed to serialize web companion state",
                type(e).__name__,
                traceback.format_exc(),
            )
            return
        with self._state_lock:
            self._state_json = state_json
        self._state_event.set()

    def queue_action(self, action_data):
        """Queue an action for the next process_actions() call."""
        self._action_queue.put(action_data)

    def process_actions(self, session):
        """
        Drain the action queue and apply actions to the session.

        Returns:
            Number of actions that were routed to an intent
        """
        handled = 0
        while True:
            try:
                action_data = self._action_queue.get_nowait()
            except queue.Empty:
                break
            try:
                if handle_action(session, action_data):
                    handled += 1
            except Exception as e:
                log_error(
                    f"Web companion action failed: {action_data!r}",
                    type(e).__name__,
                    traceback.format_exc(),
                )
        return handled

    def _make_handler(self):
        """Build the request handler class bound to this companion."""
        companion = self

        class Handler(BaseHTTPRequestHandler):
            protocol_version = "HTTP/1.1"

            def do_GET(self):
                if self.path == "/api/events":
                    self._handle_sse()
                elif self.path == "/api/state":
                    self._send_body(companion.state_json.encode("utf-8"))
                else:
                    self._send_body(b'{"error":"not found"}', status=404)

            def do_POST(self):
                if self.path == "/api/action":
                    self._handle_action()
                else:
                    self._send_body(b'{"error":"not found"}', status=404)

            def do_OPTIONS(self):
                self.send_response(204)
                self.send_header("Access-Control-Allow-Origin", "*")
                self.send_header("Access-Control-Allow-Methods", "GET, POST, OPTIONS")
                self.send_header("Access-Control-Allow-Headers", "Content-Type")
                self.send_header("Content-Length", "0")
                self.end_headers()

            def _send_body(self, body, status=200):
                self.send_response(status)
                self.send_header("Content-Type", "application/json")
                self.send_header("Content-Length", str(len(body)))
                self.send_header("Access-Control-Allow-Origin", "*")
                self.send_header("Cache-Control", "no-store")
                self.end_headers()
                self.wfile.write(body)

            def _handle_sse(self):
                self.send_response(200)
                self.send_header("Content-Type", "text/event-stream")
                self.send_header("Cache-Control", "no-cache")
                self.send_header("Connection", "close")
                self.send_header("Access-Control-Allow-Origin", "*")
                self.end_headers()
                self.close_connection = True

                last_json = None
                try:
                    while companion._running:
                        current_json = companion.state_json
                        if current_json != last_json:
                            last_json = current_json
                            msg = f"data: {current_json}\n\n"
                            self.wfile.write(msg.encode("utf-8"))
                            self.wfile.flush()

                        companion._state_event.wait(timeout=1.0)
                        companion._state_event.clear()
                except (BrokenPipeError, ConnectionResetError):
                    # Client went away
                    return

            def _handle_action(self):
                length = int(self.headers.get("Content-Length", 0))
                body = self.rfile.read(length)
                try:
                    data = json.loads(body)
                except (json.JSONDecodeError, UnicodeDecodeError):
                    self._send_body(b'{"ok":false,"error":"invalid json"}', status=400)
                    return
                if not isinstance(data, dict) or "action" not in data:
                    self._send_body(b'{"ok":false,"error":"missing action"}', status=400)
                    return
                companion.queue_action(data)
                self._send_body(b'{"ok":true}')

            def log_message(self, format, *args):
                pass

        return Handler
