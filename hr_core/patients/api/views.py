# hr_core/patients/api/views.py
from __future__ import annotations

from rest_framework import status, viewsets
from rest_framework.response import Response

from hr_core.common.permissions import FamilyMemberPermission
from hr_core.iam.context import ActorContextMixin
from hr_core.patients.api.serializers import FamilyMemberCreateSerializer, FamilyMemberSerializer
from hr_core.patients.models import FamilyMember
from hr_core.patients.selectors import family_members_for
from hr_core.patients.services import FamilyMemberService


class FamilyMemberViewSet(ActorContextMixin, viewsets.ViewSet):
    permission_classes = [FamilyMemberPermission]

    serializer_class = FamilyMemberSerializer
    queryset = FamilyMember.objects.none()

    def list(self, request):
        qs = family_members_for(patient_id=self.ctx().account_id)
        return Response(FamilyMemberSerializer(qs, many=True).data, status=status.HTTP_200_OK)

    def create(self, request):
        ser = FamilyMemberCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        member = FamilyMemberService.add(ctx=self.ctx(), **ser.validated_data)
        return Response(FamilyMemberSerializer(member).data, status=status.HTTP_201_CREATED)
