from rest_framework.throttling import SimpleRateThrottle


class FeedbackRateThrottle(SimpleRateThrottle):
    """
    Limits anonymous feedback submissions per client IP and share token, so
    one abusive client can not exhaust the budget of other shortlists.
    """
    scope = 'feedback'

    def get_cache_key(self, request, view):
        share_token = view.kwargs.get('share_token', '')
        return self.cache_format % {
            'scope': self.scope,
            'ident': f'{self.get_ident(request)}:{share_token}'
        }
