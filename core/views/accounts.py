"""
Account administration endpoints.

Thin JSON wrappers around :class:`core.services.accounts.AccountService`
for ADMIN users: create users and roles, grant and revoke roles, look a
user up.  Conflicts, validation failures and unknown names surface
through ``core.exceptions.api_exception_handler``.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from core.container import get_container
from core.permissions import IsAdminRole
from core.serializers.accounts import AppUserSerializer, NewUserSerializer, RoleSerializer


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def create_user(request):
    s = NewUserSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data
    user = get_container().accounts.add_new_user(
        vd['username'], vd['password'], vd.get('email', ''), vd['confirmPassword'],
    )
    return Response(AppUserSerializer(user).data, status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def user_detail(request, username: str):
    user = get_container().accounts.load_user_by_username(username)
    return Response(AppUserSerializer(user).data)


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def roles(request):
    """GET lists role names, POST creates one."""
    if request.method == 'GET':
        return Response([r.role for r in get_container().accounts.list_roles()])
    s = RoleSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    role = get_container().accounts.add_new_role(s.validated_data['role'])
    return Response({'role': role.role}, status=status.HTTP_201_CREATED)


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def grant_role(request, username: str):
    s = RoleSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    user = get_container().accounts.add_role_to_user(username, s.validated_data['role'])
    return Response(AppUserSerializer(user).data)


@api_view(['DELETE'])
@permission_classes([IsAuthenticated, IsAdminRole])
def revoke_role(request, username: str, role: str):
    user = get_container().accounts.remove_role_from_user(username, role)
    return Response(AppUserSerializer(user).data)
