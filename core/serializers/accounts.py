from rest_framework import serializers

from core.models import AppUser


class NewUserSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=150)
    password = serializers.CharField(write_only=True, trim_whitespace=False)
    email = serializers.EmailField(required=False, allow_blank=True, default='')
    confirmPassword = serializers.CharField(write_only=True, trim_whitespace=False)

    def validate_username(self, v):
        v = (v or '').strip()
        if not v:
            raise serializers.ValidationError('username must not be empty')
        return v


class RoleSerializer(serializers.Serializer):
    role = serializers.CharField(max_length=50)

    def validate_role(self, v):
        v = (v or '').strip()
        if not v:
            raise serializers.ValidationError('role must not be empty')
        return v


class AppUserSerializer(serializers.ModelSerializer):
    userId = serializers.CharField(source='user_id', read_only=True)
    roles = serializers.SerializerMethodField()

    class Meta:
        model = AppUser
        fields = ['id', 'userId', 'username', 'email', 'roles']

    def get_roles(self, obj) -> list[str]:
        return sorted(obj.role_names)
