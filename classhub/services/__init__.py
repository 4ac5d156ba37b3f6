# Services package init
"""
ClassHub Backend - Services Layer
==================================

What:  The layer between routes (HTTP) and the database (persistence).
How:   Each service method receives the request's AsyncSession, runs one
       parameterized statement and returns a schema object or raises an
       application exception.

Service Inventory:
    - UserService:  register, login, user directory
    - TaskService:  list / create / toggle / delete personal tasks
    - ChatService:  shared chat room (post, last 50 messages)
    - BoardService: homework, news, events, feedback (post, newest 20)
"""
