import uuid

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('catalog', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='OrderTable',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255)),
                ('number_of_guests', models.IntegerField(default=0)),
                ('empty', models.BooleanField(default=True)),
            ],
            options={
                'verbose_name_plural': 'Order tables',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Order',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('type', models.CharField(choices=[('DELIVERY', 'Delivery'), ('TAKEOUT', 'Takeout'), ('EAT_IN', 'Eat In')], max_length=20)),
                ('status', models.CharField(choices=[('WAITING', 'Waiting'), ('ACCEPTED', 'Accepted'), ('SERVED', 'Served'), ('DELIVERING', 'Delivering'), ('DELIVERED', 'Delivered'), ('COMPLETED', 'Completed')], default='WAITING', max_length=20)),
                ('order_date_time', models.DateTimeField(default=django.utils.timezone.now)),
                ('delivery_address', models.CharField(blank=True, max_length=255, null=True)),
                ('order_table', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='orders', to='orders.ordertable')),
            ],
            options={
                'ordering': ['-order_date_time'],
            },
        ),
        migrations.CreateModel(
            name='OrderLineItem',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('quantity', models.BigIntegerField()),
                ('price', models.DecimalField(decimal_places=2, max_digits=19)),
                ('menu', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='order_line_items', to='catalog.menu')),
                ('order', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='order_line_items', to='orders.order')),
            ],
            options={
                'ordering': ['id'],
            },
        ),
    ]
