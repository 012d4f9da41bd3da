from wordhunt.app import run

run()
