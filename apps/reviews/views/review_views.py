"""
Review and comment views.
"""
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly
from rest_framework.views import APIView

from apps.common.utils import success_response, error_response
from ..serializers import ReviewSerializer, ReviewCreateSerializer, CommentCreateSerializer
from ..services import ReviewService


class ProductReviewView(APIView):
    """Rated reviews of a product"""
    permission_classes = [IsAuthenticatedOrReadOnly]

    def get(self, request, product_id):
        reviews = ReviewService.list_reviews(product_id)
        return success_response(ReviewSerializer(reviews, many=True).data, 'Reviews retrieved successfully')

    def post(self, request, product_id):
        serializer = ReviewCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid review data', serializer.errors)

        review, reward = ReviewService.submit_review(
            request.user,
            product_id,
            serializer.validated_data['rating'],
            serializer.validated_data.get('comment', ''),
        )
        return success_response(
            {'review': ReviewSerializer(review).data, 'reward': reward},
            'Review submitted successfully',
            status_code=status.HTTP_201_CREATED
        )


class ProductCommentView(APIView):
    """Unrated comments of a product"""
    permission_classes = [IsAuthenticatedOrReadOnly]

    def get(self, request, product_id):
        comments = ReviewService.list_comments(product_id)
        return success_response(ReviewSerializer(comments, many=True).data, 'Comments retrieved successfully')

    def post(self, request, product_id):
        serializer = CommentCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Comment is required', serializer.errors)

        review = ReviewService.submit_comment(request.user, product_id, serializer.validated_data['comment'])
        return success_response(
            ReviewSerializer(review).data,
            'Comment added successfully',
            status_code=status.HTTP_201_CREATED
        )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_reviews(request):
    reviews = ReviewService.list_user_reviews(request.user)
    return success_response(ReviewSerializer(reviews, many=True).data, 'Reviews retrieved successfully')
