from scrolljob.config import settings

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "scrolljob.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.is_development
    )
