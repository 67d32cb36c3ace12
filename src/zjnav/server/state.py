"""Runtime paths shared by the daemon and its clients."""
import os
from pathlib import Path

server_dir = Path(f"/tmp/zjnav-{os.getenv('USER', 'nobody')}")
