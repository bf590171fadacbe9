from room_status.main import run

run()
