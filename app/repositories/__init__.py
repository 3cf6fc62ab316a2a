"""레포지토리 패키지 — 데이터베이스 접근 계층.

Repository package — Data-access layer.
``GenericRepository`` supplies query/add/update_where/delete_by_id for any
entity; per-entity modules expose singleton instances bound to one model.
"""
