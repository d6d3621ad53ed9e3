# hr_core/iam/api/me.py

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from hr_core.common.permissions import AccountPermission
from hr_core.iam.api.serializers import AccountSerializer


class MeView(APIView):
    permission_classes = [AccountPermission]

    @extend_schema(responses={200: AccountSerializer}, tags=["IAM"])
    def get(self, request):
        return Response(AccountSerializer(request.user.account).data, status=status.HTTP_200_OK)
