import os
from dotenv import load_dotenv

load_dotenv()

class Config:
  """
    Application settings, read from the environment (and a .env file when present).
    DATA_DIR is resolved against the working directory when relative.
  """

  FLASK_APP = os.getenv("FLASK_APP", "app.py")
  FLASK_RUN_PORT = int(os.getenv("FLASK_RUN_PORT", 5000))
  FLASK_DEBUG = os.getenv("FLASK_DEBUG", "True").lower() == "true"
  DATA_DIR = os.getenv("DATA_DIR", "data")
  DATASET_FILENAME = os.getenv("DATASET_FILENAME", "bgg_dataset.csv")
  ALLOWLIST_PATH = os.getenv("ALLOWLIST_PATH", "data/boardgame-template.csv")
  DEFAULT_TOP_K = int(os.getenv("DEFAULT_TOP_K", 5))
  LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
