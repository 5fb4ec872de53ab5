"""
Todo API — Services Layer
==========================

What:  Business rules sitting between the HTTP handlers and the persistence gateway.
How:   Services receive a repository, apply rules, and translate raw store
       failures into domain reasons (see app.exceptions.DomainError).

Service Inventory:
    - TodoService: create / list / get / update / delete for Todo entities
"""
