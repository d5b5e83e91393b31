"""
Fakes shared by the DeskBurst tests
"""

from src.graphics.render_surface import RenderSurface


class RecordingSurface(RenderSurface):
    """In-memory surface that logs every call."""

    def __init__(self):
        self.primitives = {}
        self.calls = []
        self._next_handle = 1

    def create_primitive(self, kind, position, size, color):
        handle = self._next_handle
        self._next_handle += 1
        self.primitives[handle] = {"kind": kind, "position": position, "size": size, "color": color}
        self.calls.append(("create", handle, kind, position))
        return handle

    def update_primitive(self, handle, position, color):
        primitive = self.primitives[handle]
        primitive["position"] = position
        primitive["color"] = color
        self.calls.append(("update", handle, position, color))

    def remove_primitive(self, handle):
        del self.primitives[handle]
        self.calls.append(("remove", handle))

    def count(self, op):
        return sum(1 for call in self.calls if call[0] == op)


class ScriptedRandom:
    """Random source returning fixed values; randrange wraps into range."""

    def __init__(self, int_value=0, float_value=0.5):
        self.int_value = int_value
        self.float_value = float_value

    def random(self):
        return self.float_value

    def randrange(self, stop):
        return self.int_value % stop


class ManualClock:
    """Clock that only moves when told to."""

    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance_ms(self, ms):
        self.now += ms / 1000.0

