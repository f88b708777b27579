"""Hotels app package.

Holds the provisioned inventory: hotels, room types and rooms. Rooms are
created by seeding or through the Django admin; the booking core only reads
them.
"""
