from fastapi import FastAPI
from odmantic import AIOEngine
from Sensor.infraestructure.repositories.sensor_repo_mongo import SensorRepositoryMongo
from Sensor.application.sensor_usecase import SensorUseCase
from Sensor.infraestructure.controllers.controller_sensor import SensorController

def init_sensor_dependencies(app: FastAPI, engine: AIOEngine):
    repo = SensorRepositoryMongo(engine)
    usecase = SensorUseCase(repo)
    controller = SensorController(usecase)
    app.state.sensor_controller = controller
