"""
In-process analytics.

Responsibilities:
- Keep a bounded log of ranking requests.
- Summarise strategy usage, interests, reasons and cache behaviour.
"""
