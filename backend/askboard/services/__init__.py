"""
Services Module

Domain logic shared by the route handlers:
- ranking: question listing (search, sort modes, hot rule, pagination)
- voting: vote toggling and vote_count upkeep
- notifications: notification fan-out for answers, accepts and votes
- tagging: tag normalization and lookup
"""
