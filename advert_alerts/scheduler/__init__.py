"""Scheduler module for the daily advert maintenance and notification tasks.

Schedule overview (times configurable through settings):
  - 00:01 daily  - Recompute remaining days and expire finished adverts
  - 09:00 daily  - Notify sales reps about adverts ending tomorrow
"""
