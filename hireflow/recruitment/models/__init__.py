from .job import Job
from .application import Application
from .shortlist import Shortlist, ShortlistItem, ClientFeedback
