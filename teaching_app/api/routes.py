"""Main API router"""

from fastapi import APIRouter

from teaching_app.api.endpoints import auth, classes, payments, selections, users

router = APIRouter()


# Paths are served at the root, matching the existing web client
router.include_router(auth.router, tags=["Auth"])
router.include_router(classes.router, tags=["Classes"])
router.include_router(selections.router, tags=["Selections"])
router.include_router(users.router, tags=["Users"])
router.include_router(payments.router, tags=["Payments"])
