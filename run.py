#!/usr/bin/env python3
import uvicorn
import logging
import os
from datetime import datetime
from pandas_logistics.core.config import settings

log_dir = settings.LOG_DIR
if not os.path.exists(log_dir):
    os.makedirs(log_dir)

logger = logging.getLogger()
logger.setLevel(settings.LOG_LEVEL)

console_handler = logging.StreamHandler()
console_handler.setLevel(settings.LOG_LEVEL)

# one log file per server start
log_filename = os.path.join(log_dir, f"app_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log")
file_handler = logging.FileHandler(log_filename, encoding='utf-8')
file_handler.setLevel(settings.LOG_LEVEL)

formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
console_handler.setFormatter(formatter)
file_handler.setFormatter(formatter)

logger.handlers = []
logger.addHandler(console_handler)
logger.addHandler(file_handler)


if __name__ == "__main__":
    logger.info(f"Starting {settings.PROJECT_NAME} API on {settings.HOST}:{settings.PORT} ({settings.NODE_ENV})")
    logger.info(f"Database: {'configured' if settings.DATABASE_URL else 'not configured, using DB_* settings'}")
    logger.info(f"Log file: {log_filename}")
    uvicorn.run("pandas_logistics.main:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD)
