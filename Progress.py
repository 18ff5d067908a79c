import logging

from errors import ValidationError
from models import PROGRESS, new_progress_entry

logger = logging.getLogger(__name__)


class ProgressService:
    def __init__(self, store):
        self.store = store

    def log_progress(self, username, steps=None, minutes=None):
        if steps is None and minutes is None:
            raise ValidationError("Please provide steps or minutes.")
        with self.store.lock(PROGRESS):
            progress = self.store.load(PROGRESS)
            progress.append(new_progress_entry(username, steps, minutes))
            self.store.save(PROGRESS, progress)
        logger.info(f"Progress logged for {username}: steps={steps} minutes={minutes}")
        return {"message": "Progress logged successfully."}

    def list_progress(self, username):
        with self.store.lock(PROGRESS):
            progress = self.store.load(PROGRESS)
        entries = [p for p in progress if p.get("username") == username]
        logger.debug(f"Fetched {len(entries)} progress entries for {username}")
        return entries
