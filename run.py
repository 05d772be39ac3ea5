from spotaddon import create_app
import os

# WSGI entry point
app = create_app(os.getenv('FLASK_ENV', 'production'))

if __name__ == '__main__':
    # The session slot lives in process memory; a reloader child would
    # start without it.
    app.run(
        host=app.config['HOST'],
        port=app.config['PORT'],
        debug=app.debug,
        use_reloader=False,
    )
