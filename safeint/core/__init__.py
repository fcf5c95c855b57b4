"""
Core: модель машинного слова и checked-целое.

Модули не зависят от внешних систем и не имеют изменяемого состояния.
"""
