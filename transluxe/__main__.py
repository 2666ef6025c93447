from transluxe.app import run_server

run_server()
