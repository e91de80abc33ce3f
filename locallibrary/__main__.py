from . import create_app
from .extensions import db

app = create_app("development")

if __name__ == "__main__":
    with app.app_context():
        db.create_all()
    # Use a real WSGI server (gunicorn/uWSGI) in production
    app.run(host="127.0.0.1", port=5000)
