"""
Customer orders API v1 views.
"""
from uuid import UUID

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.views import APIView

from shared.interfaces import success_response
from apps.products.infrastructure.repositories.django_product_repository import DjangoProductRepository
from apps.users.infrastructure.authentication import IsAccountType
from ....application.dtos import OrderDTO, OrderLineDTO, PlaceOrderDTO, UpdateOrderStatusDTO
from ....application.use_cases import PlaceOrderUseCase, UpdateOrderStatusUseCase
from ....domain.exceptions import OrderNotFoundError
from ....domain.value_objects.order_status import OrderStatus
from ....domain.value_objects.shipping_address import ShippingAddress
from ....infrastructure.repositories.django_order_repository import DjangoOrderRepository
from ...serializers import OrderSerializer, OrderCreateSerializer


class CustomerOrderAPIView(APIView):
    """Base view for the signed-in customer's orders."""
    permission_classes = [IsAccountType]
    account_type = 'customer'

    def get_repository(self):
        return DjangoOrderRepository()

    def get_own_order(self, order_id: UUID):
        order = self.get_repository().find_by_id(order_id)
        if order is None or order.customer_id != self.request.user.id:
            raise OrderNotFoundError(str(order_id))
        return order


@extend_schema(tags=['Orders'])
class OrderListCreateView(CustomerOrderAPIView):
    """Order list and create endpoint."""

    @extend_schema(
        responses={200: OrderSerializer(many=True)},
        summary="List the customer's orders",
    )
    def get(self, request):
        orders = self.get_repository().find_by_customer(request.user.id)
        data = OrderSerializer([OrderDTO.from_entity(order) for order in orders], many=True).data
        return success_response("Orders", data)

    @extend_schema(
        request=OrderCreateSerializer,
        responses={201: OrderSerializer},
        summary="Place an order",
    )
    def post(self, request):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        use_case = PlaceOrderUseCase(
            order_repository=self.get_repository(),
            product_repository=DjangoProductRepository(),
        )
        result = use_case.execute(PlaceOrderDTO(
            customer_id=request.user.id,
            shipping_address=ShippingAddress(**data['shipping_address']),
            items=[OrderLineDTO(**line) for line in data['items']],
            notes=data['notes'],
        ))

        return success_response(
            "Order placed successfully",
            OrderSerializer(result.data).data,
            status=status.HTTP_201_CREATED,
        )


@extend_schema(tags=['Orders'])
class OrderDetailView(CustomerOrderAPIView):
    """Order detail endpoint."""

    @extend_schema(
        responses={200: OrderSerializer},
        summary="Get order detail",
    )
    def get(self, request, order_id: UUID):
        order = self.get_own_order(order_id)
        return success_response("Order", OrderSerializer(OrderDTO.from_entity(order)).data)

    @extend_schema(responses={200: OrderSerializer}, summary="Cancel order")
    def delete(self, request, order_id: UUID):
        order = self.get_own_order(order_id)
        result = UpdateOrderStatusUseCase(order_repository=self.get_repository()).execute(
            UpdateOrderStatusDTO(order_id=order.id, status=OrderStatus.CANCELLED.value)
        )
        return success_response("Order cancelled", OrderSerializer(result.data).data)
