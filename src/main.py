# main.py

import uvicorn
from core_app import create_app
from core.config import settings
from modules.routes import clinic, doctor, department

app = create_app()

# Routes
app.include_router(clinic.router)
app.include_router(doctor.router)
app.include_router(department.router)

@app.get("/health")
async def health_check():
    return {"status": "healthy"}


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
