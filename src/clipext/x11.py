"""Native X11 clipboard connection built on python-xlib.

Reading converts the selection into a property on a hidden window.
Writing takes ownership of the selection and answers SelectionRequest
events until another client takes ownership (SelectionClear).

Incremental (INCR) transfers are not supported.
"""

import logging
import select
import threading
import time
from typing import Optional

from Xlib import X, Xatom, error
from Xlib.display import Display
from Xlib.protocol import event

from .errors import DecodingError, NativeClipboardError, ResourceUnavailableError

logger = logging.getLogger(__name__)

# Seconds to wait for the selection owner to answer a conversion request
READ_TIMEOUT = 2.0


class X11Connection:
    """Connection to the X server used to read or own one selection."""

    def __init__(self, selection: str = "CLIPBOARD", display_name: Optional[str] = None):
        try:
            self._display = Display(display_name)
        except (error.DisplayError, OSError) as e:
            raise ResourceUnavailableError(f"Failed to connect to X11 display: {e}") from e

        self.selection_name = selection
        screen = self._display.screen()
        self._window = screen.root.create_window(
            0, 0, 1, 1, 0, screen.root_depth,
            event_mask=X.PropertyChangeMask,
        )
        self._selection = self._display.intern_atom(selection)
        self._property = self._display.intern_atom("CLIPEXT_CONTENTS")
        self._utf8 = self._display.intern_atom("UTF8_STRING")
        self._text = self._display.intern_atom("TEXT")
        self._targets = self._display.intern_atom("TARGETS")
        self._incr = self._display.intern_atom("INCR")
        self._contents = ""

    def close(self) -> None:
        self._display.close()

    def _wait_for(self, event_type: int, timeout: float):
        """Return the next event of the given type, or None on timeout."""
        deadline = time.monotonic() + timeout
        while True:
            while self._display.pending_events():
                ev = self._display.next_event()
                if ev.type == event_type:
                    return ev
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return None
            select.select([self._display], [], [], remaining)

    def _convert(self, target: int) -> Optional[bytes]:
        """Ask the owner to convert the selection to target, None if refused."""
        self._window.convert_selection(self._selection, target, self._property, X.CurrentTime)
        self._display.flush()

        notify = self._wait_for(X.SelectionNotify, READ_TIMEOUT)
        if notify is None:
            raise NativeClipboardError("Timed out waiting for the clipboard owner to respond")
        if notify.property == X.NONE:
            return None

        prop = self._window.get_full_property(self._property, X.AnyPropertyType)
        self._window.delete_property(self._property)
        self._display.flush()

        if prop is None:
            return b""
        if prop.property_type == self._incr:
            raise NativeClipboardError("Incremental clipboard transfers are not supported")
        return bytes(prop.value)

    def get_contents(self) -> str:
        """Read the selection as text, empty when nobody owns it."""
        try:
            return self._read_text()
        except (error.XError, error.ConnectionClosedError) as e:
            raise NativeClipboardError(f"Failed to read X11 clipboard: {e}") from e

    def _read_text(self) -> str:
        if self._display.get_selection_owner(self._selection) == X.NONE:
            return ""

        for target in (self._utf8, Xatom.STRING):
            data = self._convert(target)
            if data is None:
                continue
            try:
                return data.decode("utf-8")
            except UnicodeDecodeError as e:
                raise DecodingError(e) from e

        raise NativeClipboardError("Clipboard owner refused to provide text")

    def own(self, contents: str) -> None:
        """Take ownership of the selection, serving contents from now on."""
        self._contents = contents
        self._window.set_selection_owner(self._selection, X.CurrentTime)
        self._display.flush()

        owner = self._display.get_selection_owner(self._selection)
        if owner == X.NONE or owner.id != self._window.id:
            raise NativeClipboardError("Failed to take ownership of the clipboard selection")

    def serve(self) -> None:
        """Answer selection requests until another client takes ownership."""
        while True:
            ev = self._display.next_event()
            if ev.type == X.SelectionClear and ev.atom == self._selection:
                logger.debug("Lost ownership of %s", self.selection_name)
                return
            if ev.type == X.SelectionRequest:
                self._answer(ev)

    def hold(self, contents: str) -> None:
        """Store contents and block until they are superseded."""
        self.own(contents)
        self.serve()

    def _answer(self, request) -> None:
        prop = request.property
        if prop == X.NONE:
            # Obsolete clients leave the property unset
            prop = request.target

        if request.target == self._targets:
            request.requestor.change_property(
                prop, Xatom.ATOM, 32,
                [self._targets, self._utf8, self._text, Xatom.STRING],
            )
        elif request.target == Xatom.STRING:
            # ICCCM STRING is Latin-1
            data = self._contents.encode("latin-1", errors="replace")
            request.requestor.change_property(prop, Xatom.STRING, 8, data)
        elif request.target in (self._utf8, self._text):
            # TEXT lets the owner pick the type
            data = self._contents.encode("utf-8")
            request.requestor.change_property(prop, self._utf8, 8, data)
        else:
            prop = X.NONE

        notify = event.SelectionNotify(
            time=request.time,
            requestor=request.requestor,
            selection=request.selection,
            target=request.target,
            property=prop,
        )
        request.requestor.send_event(notify, event_mask=0)
        self._display.flush()

    def set_contents(self, contents: str) -> None:
        """Own the selection from a background thread.

        The contents are lost when this process exits.
        """
        owner = X11Connection(self.selection_name)
        owner.own(contents)
        thread = threading.Thread(target=_serve_until_cleared, args=(owner,), daemon=True)
        thread.start()


def _serve_until_cleared(owner: X11Connection) -> None:
    try:
        owner.serve()
    except error.ConnectionClosedError:
        logger.exception("X11 connection closed while serving the clipboard")
    finally:
        owner.close()
