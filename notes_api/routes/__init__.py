# Routes package init
"""
Notes API — API Routes Package
================================

Route Inventory:
    - index.py:   GET    /                   (HTML placeholder page)
    - notes.py:   GET    /api/notes          (list notes)
                  POST   /api/notes          (create note)
                  GET    /api/notes/{id}     (get note)
                  PUT    /api/notes/{id}     (replace note)
                  DELETE /api/notes/{id}     (delete note)
    - health.py:  GET    /health             (service health check)

Routes are thin: they extract the path id and body, call NoteService and
pick the status code. Business logic lives in services/.
"""
