import logging

logger = logging.getLogger(__name__)


class KeyEventSource:
    """Publishes key presses to whoever is subscribed."""

    def __init__(self):
        self._handlers = []

    def subscribe(self, handler):
        self._handlers.append(handler)

        def unsubscribe():
            if handler in self._handlers:
                self._handlers.remove(handler)

        return unsubscribe

    def emit(self, key, ctrl=False):
        handled = False
        for handler in list(self._handlers):
            if handler(key.lower(), ctrl):
                handled = True
        return handled


def bind_workflow_shortcuts(source, workflow):
    """Ctrl+S submits and Ctrl+N advances the given workflow. Returns the unsubscribe callable."""

    bindings = {
        's': workflow.submit,
        'n': workflow.next,
    }

    def handle(key, ctrl):
        if not ctrl or key not in bindings:
            return False
        logger.debug(f"Shortcut Ctrl+{key.upper()}")
        bindings[key]()
        return True

    return source.subscribe(handle)
