"""
Animation-frame style scheduler.

Callbacks asked for with request_frame() are run once, on the next frame the
host loop hands over. A callback that wants to keep running asks again.
"""


class FrameScheduler:
    def __init__(self):
        self.pending = []

    def request_frame(self, callback):
        self.pending.append(callback)

    def run_pending(self, timestamp):
        """Run every callback queued before this frame with the frame timestamp"""
        callbacks, self.pending = self.pending, []
        for callback in callbacks:
            callback(timestamp)
        return len(callbacks)

    def cancel_all(self):
        self.pending = []

    @property
    def idle(self):
        return not self.pending
