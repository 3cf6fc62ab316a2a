"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services compose repository calls, stamp audit fields, validate identifiers
before any store call, and translate zero affected rows into NotFoundError.
"""
