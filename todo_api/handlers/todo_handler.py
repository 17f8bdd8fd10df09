from mangum import Mangum
from todo_api.main import create_app

# the only app built at import time; local runs go through `python -m todo_api`
app = create_app()

handler = Mangum(app)
