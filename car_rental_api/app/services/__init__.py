"""
Service layer.

Services hold the SQL and business rules; endpoints call them and
translate their exceptions (see ``errors``) into HTTP responses.
"""
