from backend.app.models.user import User
from backend.app.models.profile import Profile
from backend.app.models.post import Post
