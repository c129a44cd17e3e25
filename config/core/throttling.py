import re

from rest_framework.throttling import SimpleRateThrottle

RATE_RE = re.compile(r'^\s*(\d+)\s*/\s*(\d*)\s*([smhd])\w*\s*$')
PERIODS = {'s': 1, 'm': 60, 'h': 3600, 'd': 86400}


class ClientRateThrottle(SimpleRateThrottle):
    """
    Per-client (IP address) limit on every API request, authenticated or not.
    Besides DRF's '100/min' rates it accepts multi-unit windows such as
    '100/15m' (100 requests per 15 minutes).
    """
    scope = 'api'

    def parse_rate(self, rate):
        if rate is None:
            return (None, None)
        match = RATE_RE.match(rate)
        if not match:
            raise ValueError(f'Invalid throttle rate: {rate!r}')
        num, multiplier, unit = match.groups()
        return (int(num), int(multiplier or 1) * PERIODS[unit])

    def get_cache_key(self, request, view):
        return self.cache_format % {
            'scope': self.scope,
            'ident': self.get_ident(request),
        }
