"""
Use cases over the pessoa table.

Services validate caller input, open a session per call and delegate the SQL
to repositories, translating driver failures into the package's errors.
"""
