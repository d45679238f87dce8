"""
Campus API Backend: Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract of every resource.
How:   Each resource module defines three shapes over one set of fields:
       - <Resource>Create:   query parameters accepted by POST .../post
       - <Resource>Update:   JSON body accepted by PUT (identity optional, ignored)
       - <Resource>Response: serialized record returned on success

Wire names are camelCase (`dateAdded`, `orgCode`); Python attributes stay
snake_case and match the ORM model attribute names one to one, which is what
lets the generic controller move values between schemas and entities by name.
"""
