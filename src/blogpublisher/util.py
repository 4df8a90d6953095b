import os
import logging
from dotenv import load_dotenv

load_dotenv(override=True)

logging.basicConfig(level=logging.INFO)
logging.getLogger("git").setLevel(logging.WARNING)
logger = logging.getLogger("blogpublisher")

BUILD_COMMAND = os.getenv("BLOG_BUILD_COMMAND", "hugo")
OUTPUT_DIR = os.getenv("BLOG_OUTPUT_DIR", "public")
REMOTE = os.getenv("BLOG_REMOTE") or None
BRANCH = os.getenv("BLOG_BRANCH") or None
