"""Host information and gateway status probe."""

import asyncio
import logging
import platform
import socket
import time
from datetime import datetime, timezone
from typing import Any, Sequence

import psutil

logger = logging.getLogger(__name__)


class SystemInfo:
    """Collects host stats and asks the gateway CLI whether it is running."""

    def __init__(self, gateway_command: Sequence[str], gateway_timeout: float = 5.0):
        self.gateway_command = list(gateway_command)
        self.gateway_timeout = gateway_timeout

    async def collect(self) -> dict[str, Any]:
        """Snapshot of host and gateway state."""
        memory = psutil.virtual_memory()
        info: dict[str, Any] = {
            "time": datetime.now(timezone.utc).isoformat(),
            "hostname": socket.gethostname(),
            "platform": platform.system().lower(),
            "uptime": int(time.time() - psutil.boot_time()),
            "freemem": memory.available,
            "totalmem": memory.total,
        }
        info.update(await self.gateway_status())
        return info

    async def gateway_status(self) -> dict[str, Any]:
        """Run the gateway status command and interpret its output."""
        try:
            process = await asyncio.create_subprocess_exec(
                *self.gateway_command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            logger.warning(f"Gateway status check failed: {e}")
            return {"gateway": "error", "gateway_error": str(e)}

        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(),
                timeout=self.gateway_timeout,
            )
        except asyncio.TimeoutError:
            process.kill()
            await process.wait()
            error = f"Gateway status timed out after {self.gateway_timeout}s"
            logger.warning(error)
            return {"gateway": "error", "gateway_error": error}

        out = (
            stdout.decode("utf-8", errors="replace") + stderr.decode("utf-8", errors="replace")
        ).strip()

        if process.returncode != 0:
            error = f"Gateway status exited with {process.returncode}: {out}"
            logger.warning(error)
            return {"gateway": "error", "gateway_error": error}

        if "running" in out.lower():
            gateway = "running"
        else:
            gateway = out.splitlines()[0] if out else "unknown"

        return {"gateway": gateway, "gateway_raw": out}
