from frontend.reducers.alert import alert
from frontend.reducers.auth import auth
from frontend.reducers.post import post
from frontend.reducers.profile import profile
from frontend.store import combine_reducers

root_reducer = combine_reducers(alert=alert, auth=auth, profile=profile, post=post)
