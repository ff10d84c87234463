from fastapi import FastAPI
from odmantic import AIOEngine
from core.config import get_max_upload_bytes
from Images.infraestructure.repositories.image_repo_mongo import ImageRepositoryMongo
from Images.application.image_usecase import ImageUseCase
from Images.infraestructure.controllers.controller_image import ImageController

def init_image_dependencies(app: FastAPI, engine: AIOEngine):
    repo = ImageRepositoryMongo(engine)
    usecase = ImageUseCase(repo, max_bytes=get_max_upload_bytes())
    controller = ImageController(usecase)
    app.state.image_controller = controller
