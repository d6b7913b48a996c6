"""
Services Package - Remote API Clients

- users_api: read (paginated) and write (create/update/delete) access to the
  users REST resource
"""
