"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
member_repository holds the dynamic search engine and bulk operations;
team_repository covers team lookups. Absent rows come back as None.
"""
