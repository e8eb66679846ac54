from fastapi import APIRouter, Depends
import psutil, platform, socket, time, datetime

from app.config import settings
from app.dependencies import get_directory
from app.services.student_directory import StudentDirectory

router = APIRouter()

# Track uptime
start_time = time.time()

@router.get("/health")
async def health_check(directory: StudentDirectory = Depends(get_directory)):
    memory = psutil.virtual_memory()
    disk = psutil.disk_usage("/")
    uptime_seconds = time.time() - start_time

    return {
        "status": "ok",
        "env": settings.ENV,
        "students": await directory.count(),
        "metrics": {
            # non-blocking: usage since the previous call
            "cpu_usage_percent": psutil.cpu_percent(interval=None),
            "memory_percent": memory.percent,
            "memory_used_mb": round(memory.used / (1024 * 1024), 2),
            "disk_percent": disk.percent,
            "uptime_hours": round(uptime_seconds / 3600, 2),
        },
        "server_info": {
            "hostname": socket.gethostname(),
            "os": platform.system(),
            "python_version": platform.python_version(),
            "timestamp": datetime.datetime.now().isoformat(),
        },
    }
