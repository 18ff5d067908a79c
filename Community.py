import logging

from errors import ValidationError
from models import COMMUNITY, new_post

logger = logging.getLogger(__name__)


class CommunityService:
    def __init__(self, store):
        self.store = store

    def list_posts(self):
        with self.store.lock(COMMUNITY):
            return self.store.load(COMMUNITY)

    def create_post(self, username, description, title=None, image=None, duration=None, activity_type=None):
        if not username or not description:
            raise ValidationError("Post must include a username and description.")
        with self.store.lock(COMMUNITY):
            posts = self.store.load(COMMUNITY)
            posts.append(new_post(username, description, title, image, duration, activity_type))
            self.store.save(COMMUNITY, posts)
        logger.info(f"Community post created by {username}")
        return {"message": "Post created successfully."}
