"""Connection to the zjnav server."""
import os
import subprocess
import sys
import time
from pathlib import Path
from typing import Optional

from .config import get_config
from .server import state


class Connection:
    """Manages connection to the zjnav server."""

    def __init__(self):
        config = get_config()
        self.server_dir: Path = state.server_dir
        self.pid_file = self.server_dir / "server.pid"
        self.base_url = f"http://{config.server.host}:{config.server.port}"

    @property
    def server_pid(self) -> Optional[int]:
        """Get server PID if running."""
        try:
            if self.pid_file.exists():
                pid = int(self.pid_file.read_text().strip())
                # Check if process is actually running
                os.kill(pid, 0)
                return pid
        except (ValueError, ProcessLookupError, FileNotFoundError):
            pass
        return None

    @property
    def is_running(self) -> bool:
        return self.server_pid is not None

    def start(self) -> bool:
        """Start the server in the background."""
        if self.is_running:
            return True

        self.server_dir.mkdir(exist_ok=True)

        subprocess.Popen(
            [sys.executable, "-m", "zjnav.server.main"],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True
        )

        # Wait for server to start
        for _ in range(20):
            if self.is_running:
                return True
            time.sleep(0.1)

        return False

    def stop(self) -> bool:
        """Stop the server."""
        pid = self.server_pid
        if not pid:
            return True

        try:
            os.kill(pid, 15)

            # Wait for graceful shutdown
            for _ in range(10):
                try:
                    os.kill(pid, 0)
                    time.sleep(0.1)
                except ProcessLookupError:
                    break
            else:
                os.kill(pid, 9)

            return True

        except ProcessLookupError:
            return True
        except PermissionError:
            return False
