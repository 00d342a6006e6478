# Recording sessions are owned by the remote service; the caller keeps the
# resource id and sid. Nothing is persisted in the Django database.
