"""Configuration variables for the MagicQuill client.

Every value can be overridden from the environment.
"""

import os

MAGICQUILL_SERVER: str = os.environ.get("MAGICQUILL_SERVER", "http://127.0.0.1:7860")
REQUEST_TIMEOUT: float = float(os.environ.get("MAGICQUILL_REQUEST_TIMEOUT", "120"))  # seconds

GUESS_PROMPT_PATH: str = "/magic_quill/guess_prompt"
PROCESS_BACKGROUND_PATH: str = "/magic_quill/process_background_img"
GENERATE_PATH: str = "/magic_quill/generate"

CHECKLIST_RESOLUTIONS: list[int] = [
    int(r) for r in os.environ.get("MAGICQUILL_CHECKLIST_RESOLUTIONS", "256,512,1024").split(",") if r.strip()
]
# Longest side the backend resizes background images to
BACKGROUND_RESOLUTION: int = int(os.environ.get("MAGICQUILL_BACKGROUND_RESOLUTION", "512"))

LOG_LEVEL: str = os.environ.get("MAGICQUILL_LOG_LEVEL", "INFO")
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
