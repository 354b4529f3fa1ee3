import sys, threading, time, itertools

class Spinner:
    def __init__(self, text="", stream=None, tick: float=0.1):
        self.text = text
        self.stream = stream
        self.tick = tick
        self._stop = threading.Event()
        self._t = None

    def _out(self):
        return self.stream or sys.stdout

    def start(self):
        self._stop.clear()
        self._t = threading.Thread(target=self._run, daemon=True)
        self._t.start()

    def _run(self):
        frames = itertools.cycle(["|", "/", "-", "\\"])
        out = self._out()
        while not self._stop.is_set():
            out.write(f"\r{self.text} {next(frames)}")
            out.flush()
            time.sleep(self.tick)
        out.write("\r" + " " * (len(self.text) + 2) + "\r")
        out.flush()

    def stop(self):
        if self._t:
            self._stop.set()
            self._t.join(timeout=1)
            self._t = None

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, *exc):
        self.stop()
        return False
