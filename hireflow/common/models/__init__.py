from .abstract import TimeStampedModel, BaseModel, SlugModel
from .event_log import EventLog
