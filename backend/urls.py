"""
URL configuration for backend project.

    /api/offices/                       오피스 목록 (검색/페이지)
    /api/offices/<id>/                  오피스 상세
    /api/appointments/confirmation/     예약 완료 화면
"""
from django.urls import path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from appointments.views import check_in_confirmation
from offices.views import offices, office_detail

urlpatterns = [
    path("api/offices/", offices),
    path("api/offices/<str:location_id>/", office_detail),
    path("api/appointments/confirmation/", check_in_confirmation),
]
urlpatterns += [
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
]
