from scrolljob.database.mongo import init_mongo, close_mongo, ping_mongo

__all__ = ["init_mongo", "close_mongo", "ping_mongo"]
