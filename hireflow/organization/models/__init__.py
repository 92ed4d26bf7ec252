from .agency import Agency, Client
