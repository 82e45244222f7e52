"""
Application services layer (use cases).

Services depend on ports (interfaces) from core/, never on concrete
implementations from adapters/.
"""
