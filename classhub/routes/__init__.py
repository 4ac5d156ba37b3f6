# Routes package init
"""
ClassHub Backend - API Routes Package
======================================

Route Inventory:
    - auth.py:    POST /register, POST /login
    - users.py:   GET  /api/users
    - tasks.py:   GET/POST /api/tasks, PUT/DELETE /api/tasks/{id}
    - chat.py:    GET/POST /api/chat
    - boards.py:  GET/POST /api/{homework,news,events,feedback}
    - admin.py:   GET  /danger/clear-database (token + confirmation gated)
    - health.py:  GET  /health

Routes stay THIN: they pull data out of the request, call one service
method, and pick the status code. SQL lives in the services.
"""
